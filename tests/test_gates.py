"""ゲートのエンコード／デコードのユニットテスト"""

import pytest
from k1s0_featureflag import (
    FeatureFlagError,
    FeatureFlagErrorCodes,
    GateKey,
    default_feature_value,
    delete_request_body,
    gate_request_body,
    result_for_feature,
)


def test_gate_request_body_boolean() -> None:
    """boolean は空オブジェクト。"""
    assert gate_request_body("boolean", "true") == {}


def test_gate_request_body_groups() -> None:
    """groups は name。"""
    assert gate_request_body("groups", "admins") == {"name": "admins"}


def test_gate_request_body_actors() -> None:
    """actors は flipper_id。"""
    assert gate_request_body("actors", "User;1") == {"flipper_id": "User;1"}


@pytest.mark.parametrize("key", ["percentage_of_actors", "percentage_of_time"])
def test_gate_request_body_percentage(key: str) -> None:
    """percentage_* は percentage。"""
    assert gate_request_body(key, 10) == {"percentage": 10}


def test_gate_request_body_invalid_key() -> None:
    """未知のゲートキーは INVALID_GATE_KEY。"""
    with pytest.raises(FeatureFlagError) as exc_info:
        gate_request_body("expression", "x")
    assert exc_info.value.code == FeatureFlagErrorCodes.INVALID_GATE_KEY
    assert "expression is not a valid flipper gate key" in str(exc_info.value)


def test_delete_request_body_only_for_groups_and_actors() -> None:
    """disable のボディは groups / actors のみ。"""
    assert delete_request_body("boolean", True) is None
    assert delete_request_body("percentage_of_time", 25) is None
    assert delete_request_body("groups", "admins") == {"name": "admins"}
    assert delete_request_body("actors", 22) == {"flipper_id": 22}


def test_delete_request_body_invalid_key() -> None:
    """disable でも未知のゲートキーはエラー。"""
    with pytest.raises(FeatureFlagError):
        delete_request_body("unknown", None)


def test_result_for_feature_boolean() -> None:
    """boolean は true のときだけ "true"。"""
    assert result_for_feature("boolean", True) == "true"
    assert result_for_feature("boolean", False) is None
    assert result_for_feature("boolean", None) is None
    assert result_for_feature("boolean", "true") is None


def test_result_for_feature_sets() -> None:
    """groups / actors は集合。"""
    assert result_for_feature("groups", ["a", "b", "a"]) == {"a", "b"}
    assert result_for_feature("actors", []) == set()
    assert result_for_feature("actors", None) == set()


def test_result_for_feature_percentage() -> None:
    """percentage_* は文字列化。0 は "0"。"""
    assert result_for_feature("percentage_of_actors", 0) == "0"
    assert result_for_feature("percentage_of_actors", 10) == "10"
    assert result_for_feature("percentage_of_time", 12.5) == "12.5"
    assert result_for_feature("percentage_of_time", None) is None


def test_result_for_feature_invalid_key() -> None:
    """デコード時も未知のゲートキーはエラー。"""
    with pytest.raises(FeatureFlagError) as exc_info:
        result_for_feature("bogus", 1)
    assert exc_info.value.code == FeatureFlagErrorCodes.INVALID_GATE_KEY


def test_default_feature_value_has_all_keys() -> None:
    """デフォルトスナップショットは 5 つのキーを全て持つ。"""
    snapshot = default_feature_value()
    assert set(snapshot) == set(GateKey)
    assert snapshot == {
        GateKey.BOOLEAN: None,
        GateKey.GROUPS: set(),
        GateKey.ACTORS: set(),
        GateKey.PERCENTAGE_OF_ACTORS: None,
        GateKey.PERCENTAGE_OF_TIME: None,
    }


def test_default_feature_value_is_fresh() -> None:
    """呼び出しごとに別の集合を返すこと。"""
    first = default_feature_value()
    first[GateKey.GROUPS].add("admins")  # type: ignore[union-attr]
    assert default_feature_value()[GateKey.GROUPS] == set()


def test_gate_key_parse() -> None:
    """GateKey.parse は文字列を列挙値に変換する。"""
    assert GateKey.parse("actors") is GateKey.ACTORS
    assert GateKey.ACTORS == "actors"


@pytest.mark.parametrize("value", ["admins", {"name": "admins"}, 5, True])
def test_result_for_feature_sets_require_list(value: object) -> None:
    """groups / actors の値は配列のみ。"""
    with pytest.raises(FeatureFlagError) as exc_info:
        result_for_feature("groups", value)
    assert exc_info.value.code == FeatureFlagErrorCodes.INVALID_RESPONSE


@pytest.mark.parametrize("value", [True, False, "10", [10], {"percentage": 10}])
def test_result_for_feature_percentage_requires_number(value: object) -> None:
    """percentage_* の値は数値のみ（bool は不可）。"""
    with pytest.raises(FeatureFlagError) as exc_info:
        result_for_feature("percentage_of_time", value)
    assert exc_info.value.code == FeatureFlagErrorCodes.INVALID_RESPONSE
