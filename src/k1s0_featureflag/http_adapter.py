"""リモート feature flag API を使う HTTP アダプター実装"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from .adapter import FeatureFlagAdapter
from .config import HttpAdapterConfig
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .gates import (
    default_feature_value,
    delete_request_body,
    gate_request_body,
    result_for_feature,
)
from .models import FeatureLike, FeatureSnapshot, GateKey, GateLike, ThingLike
from .request import HttpRequest

logger = logging.getLogger(__name__)


class HttpAdapter(FeatureFlagAdapter):
    """フィーチャーの保存・変更をリモート API に委譲するアダプター。

    例:
        adapter = HttpAdapter("http://www.app.com/mount-point")
        adapter.get(Feature("chat"))
    """

    name = "http"

    def __init__(
        self,
        mount_path: str,
        config: HttpAdapterConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._path = str(mount_path).rstrip("/")
        self._request = HttpRequest(config or HttpAdapterConfig(), transport=transport)

    def _url(self, path: str) -> str:
        return f"{self._path}/api/v1/features{path}"

    def _feature_path(self, feature: FeatureLike, gate_key: str | None = None) -> str:
        # キーに含まれる "/" "?" "#" がパスの外に出ないようエンコードする
        path = f"/{quote(str(feature.key), safe='')}"
        if gate_key is not None:
            path += f"/{gate_key}"
        return self._url(path)

    def _parse_json(self, resp: httpx.Response, context: str) -> dict[str, Any]:
        if not resp.is_success:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.UNEXPECTED_STATUS,
                message=f"{context}: HTTP {resp.status_code}: {resp.text}",
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_RESPONSE,
                message=f"{context}: response body is not JSON",
                cause=e,
            ) from e
        if not isinstance(data, dict):
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_RESPONSE,
                message=f"{context}: expected a JSON object",
            )
        return data

    def _succeeded(self, resp: httpx.Response, context: str, *statuses: int) -> bool:
        if resp.status_code in statuses:
            return True
        logger.warning(
            "featureflag operation not successful",
            extra={"operation": context, "status_code": resp.status_code},
        )
        return False

    def get(self, feature: FeatureLike) -> FeatureSnapshot:
        context = f"get({feature.key})"
        resp = self._request.get(self._feature_path(feature))
        if resp.status_code == httpx.codes.NOT_FOUND:
            return default_feature_value()
        data = self._parse_json(resp, context)
        if data.get("state") == "off":
            return default_feature_value()
        result = default_feature_value()
        try:
            for gate in data.get("gates") or []:
                key = GateKey.parse(gate["key"])
                result[key] = result_for_feature(key, gate.get("value"))
        except (KeyError, TypeError, AttributeError) as e:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_RESPONSE,
                message=f"{context}: malformed gates: {e}",
                cause=e,
            ) from e
        return result

    def add(self, feature: FeatureLike) -> bool:
        resp = self._request.post(self._url(""), {"name": feature.key})
        return self._succeeded(resp, f"add({feature.key})", httpx.codes.OK)

    def features(self) -> set[str]:
        data = self._parse_json(self._request.get(self._url("")), "features")
        try:
            return {feature["key"] for feature in data.get("features") or []}
        except (KeyError, TypeError) as e:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.INVALID_RESPONSE,
                message=f"features: malformed features: {e}",
                cause=e,
            ) from e

    def remove(self, feature: FeatureLike) -> bool:
        resp = self._request.delete(self._feature_path(feature))
        return self._succeeded(resp, f"remove({feature.key})", httpx.codes.NO_CONTENT)

    def enable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        body = gate_request_body(gate.key, str(thing.value))
        resp = self._request.post(self._feature_path(feature, gate.key), body)
        return self._succeeded(resp, f"enable({feature.key}, {gate.key})", httpx.codes.OK)

    def disable(self, feature: FeatureLike, gate: GateLike, thing: ThingLike) -> bool:
        body = delete_request_body(gate.key, thing.value)
        resp = self._request.delete(self._feature_path(feature, gate.key), body)
        return self._succeeded(
            resp,
            f"disable({feature.key}, {gate.key})",
            httpx.codes.OK,
            httpx.codes.NOT_FOUND,
        )

    def clear(self, feature: FeatureLike) -> bool:
        resp = self._request.delete(self._feature_path(feature, GateKey.BOOLEAN))
        return self._succeeded(resp, f"clear({feature.key})", httpx.codes.OK)
