"""featureflag データモデル"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from .exceptions import FeatureFlagError, FeatureFlagErrorCodes


class GateKey(StrEnum):
    """ゲート種別。閉じた集合で、これ以外の値はエラー。"""

    BOOLEAN = "boolean"
    GROUPS = "groups"
    ACTORS = "actors"
    PERCENTAGE_OF_ACTORS = "percentage_of_actors"
    PERCENTAGE_OF_TIME = "percentage_of_time"

    @classmethod
    def parse(cls, key: str) -> GateKey:
        """文字列を GateKey に変換する。未知のキーは FeatureFlagError。"""
        try:
            return cls(str(key))
        except ValueError as e:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_GATE_KEY,
                message=f"{key} is not a valid flipper gate key",
                cause=e,
            ) from e


# boolean / percentage_* は str | None、groups / actors は set[str]
GateValue = str | set[str] | None
FeatureSnapshot = dict[GateKey, GateValue]


class FeatureLike(Protocol):
    """アダプターが受け取るフィーチャー。"""

    @property
    def key(self) -> str: ...


class GateLike(Protocol):
    """アダプターが受け取るゲート。"""

    @property
    def key(self) -> str: ...


class ThingLike(Protocol):
    """ゲート評価対象（アクター、グループ名、割合など）。"""

    @property
    def value(self) -> Any: ...


@dataclass(frozen=True)
class Feature:
    """フィーチャー。"""

    key: str


@dataclass(frozen=True)
class Gate:
    """ゲート。"""

    key: str


@dataclass(frozen=True)
class Actor:
    """ゲート評価対象の値。"""

    value: Any
