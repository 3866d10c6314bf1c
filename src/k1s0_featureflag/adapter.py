"""FeatureFlagAdapter 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .models import FeatureLike, FeatureSnapshot, GateLike, ThingLike


class FeatureFlagAdapter(ABC):
    """フィーチャーフラグの保存・変更を担うアダプター抽象基底クラス。"""

    name: str

    @abstractmethod
    def get(self, feature: FeatureLike) -> FeatureSnapshot:
        """フィーチャーのゲート値を取得する。"""
        ...

    @abstractmethod
    def add(self, feature: FeatureLike) -> bool:
        """フィーチャーを追加する。"""
        ...

    @abstractmethod
    def features(self) -> set[str]:
        """全フィーチャーのキーを取得する。"""
        ...

    @abstractmethod
    def remove(self, feature: FeatureLike) -> bool:
        """フィーチャーを削除する。"""
        ...

    @abstractmethod
    def enable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        """フィーチャーのゲートを有効化する。"""
        ...

    @abstractmethod
    def disable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        """フィーチャーのゲートを無効化する。"""
        ...

    @abstractmethod
    def clear(self, feature: FeatureLike) -> bool:
        """フィーチャーの全ゲート値をクリアする。"""
        ...

    def get_multi(self, features: Iterable[FeatureLike]) -> dict[str, FeatureSnapshot] | None:
        """複数フィーチャーの一括取得。未実装のため常に None を返す。"""
        return None
