"""ゲートのエンコード／デコード

ゲート種別ごとに、リクエストボディと API レスポンス値の相互変換を行う。
"""

from __future__ import annotations

from typing import Any

from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .models import FeatureSnapshot, GateKey, GateValue

# disable 時にボディを送るゲート
GATES_WITH_DELETE_REQUEST_BODY: frozenset[GateKey] = frozenset({GateKey.GROUPS, GateKey.ACTORS})


def gate_request_body(key: str, value: Any) -> dict[str, Any]:
    """ゲートの有効化／無効化リクエストボディを返す。

    例:
        gate_request_body("percentage_of_actors", 10)
        # => {"percentage": 10}
    """
    gate_key = GateKey.parse(key)
    if gate_key is GateKey.BOOLEAN:
        return {}
    if gate_key is GateKey.GROUPS:
        return {"name": value}
    if gate_key is GateKey.ACTORS:
        return {"flipper_id": value}
    # PERCENTAGE_OF_ACTORS / PERCENTAGE_OF_TIME
    return {"percentage": value}


def delete_request_body(key: str, value: Any) -> dict[str, Any] | None:
    """disable 用のリクエストボディ。groups / actors 以外は None（ボディなし）。"""
    if GateKey.parse(key) not in GATES_WITH_DELETE_REQUEST_BODY:
        return None
    return gate_request_body(key, value)


def result_for_feature(key: str, value: Any) -> GateValue:
    """API レスポンスのゲート値をスナップショットの値に変換する。"""
    gate_key = GateKey.parse(key)
    if gate_key is GateKey.BOOLEAN:
        return "true" if value is True else None
    if gate_key in (GateKey.GROUPS, GateKey.ACTORS):
        if value is None:
            return set()
        if not isinstance(value, list):
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_RESPONSE,
                message=f"{gate_key} gate value must be a list: {value!r}",
            )
        return {str(v) for v in value}
    if value is None:
        return None
    # bool は int のサブクラスなので明示的に除外する
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.INVALID_RESPONSE,
            message=f"{gate_key} gate value must be a number: {value!r}",
        )
    return "0" if value == 0 else str(value)


def default_feature_value() -> FeatureSnapshot:
    """ゲート値が何も記録されていない状態のスナップショット。"""
    return {
        GateKey.BOOLEAN: None,
        GateKey.GROUPS: set(),
        GateKey.ACTORS: set(),
        GateKey.PERCENTAGE_OF_ACTORS: None,
        GateKey.PERCENTAGE_OF_TIME: None,
    }
