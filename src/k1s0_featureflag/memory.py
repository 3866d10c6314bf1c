"""InMemoryAdapter 実装"""

from __future__ import annotations

import threading
from typing import cast

from .adapter import FeatureFlagAdapter
from .gates import default_feature_value
from .models import FeatureLike, FeatureSnapshot, GateKey, GateLike, ThingLike


class InMemoryAdapter(FeatureFlagAdapter):
    """テスト・ローカル用インメモリアダプター。

    HttpAdapter と同じ形のスナップショットを返す。
    """

    name = "memory"

    def __init__(self) -> None:
        self._features: dict[str, FeatureSnapshot] = {}
        self._lock = threading.Lock()

    def get(self, feature: FeatureLike) -> FeatureSnapshot:
        with self._lock:
            snapshot = self._features.get(feature.key)
            if snapshot is None:
                return default_feature_value()
            return {
                key: set(value) if isinstance(value, set) else value
                for key, value in snapshot.items()
            }

    def add(self, feature: FeatureLike) -> bool:
        with self._lock:
            self._features.setdefault(feature.key, default_feature_value())
        return True

    def features(self) -> set[str]:
        with self._lock:
            return set(self._features)

    def remove(self, feature: FeatureLike) -> bool:
        with self._lock:
            return self._features.pop(feature.key, None) is not None

    def enable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        gate_key = GateKey.parse(gate.key)
        with self._lock:
            snapshot = self._features.setdefault(feature.key, default_feature_value())
            if gate_key is GateKey.BOOLEAN:
                snapshot[gate_key] = "true"
            elif gate_key in (GateKey.GROUPS, GateKey.ACTORS):
                cast(set[str], snapshot[gate_key]).add(str(thing.value))
            else:
                snapshot[gate_key] = str(thing.value)
        return True

    def disable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        gate_key = GateKey.parse(gate.key)
        with self._lock:
            snapshot = self._features.get(feature.key)
            if snapshot is None:
                return True
            if gate_key is GateKey.BOOLEAN:
                self._features[feature.key] = default_feature_value()
            elif gate_key in (GateKey.GROUPS, GateKey.ACTORS):
                cast(set[str], snapshot[gate_key]).discard(str(thing.value))
            else:
                snapshot[gate_key] = None
        return True

    def clear(self, feature: FeatureLike) -> bool:
        with self._lock:
            if feature.key in self._features:
                self._features[feature.key] = default_feature_value()
        return True
