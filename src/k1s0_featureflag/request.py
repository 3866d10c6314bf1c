"""HTTP リクエストディスパッチャー"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import HttpAdapterConfig

logger = logging.getLogger(__name__)

# httpx.Client の既定タイムアウト（秒）
_DEFAULT_TIMEOUT_SECONDS = 5.0


class HttpRequest:
    """設定済みのヘッダー・Basic 認証・タイムアウトを全リクエストに適用する。

    例:
        request = HttpRequest(HttpAdapterConfig(headers={"X-Header": "value"}))
        response = request.get("http://www.app.com/mount-point/api/v1/features")

    トランスポート層の例外（接続失敗、タイムアウト等）は捕捉せずそのまま送出する。
    """

    def __init__(
        self,
        config: HttpAdapterConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._headers = config.merged_headers()
        self._auth = config.auth
        self._timeout = self._build_timeout(config)
        self._transport = transport

    @staticmethod
    def _build_timeout(config: HttpAdapterConfig) -> httpx.Timeout | None:
        if config.read_timeout is None and config.open_timeout is None:
            return None
        return httpx.Timeout(
            _DEFAULT_TIMEOUT_SECONDS,
            connect=config.open_timeout or _DEFAULT_TIMEOUT_SECONDS,
            read=config.read_timeout or _DEFAULT_TIMEOUT_SECONDS,
        )

    def _make_client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {"headers": self._headers, "auth": self._auth}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _send(self, method: str, url: str, payload: Any = None) -> httpx.Response:
        with self._make_client() as client:
            if payload is None:
                resp = client.request(method, url)
            else:
                resp = client.request(method, url, json=payload)
        logger.debug(
            "featureflag http request",
            extra={"method": method, "url": url, "status_code": resp.status_code},
        )
        return resp

    def get(self, url: str) -> httpx.Response:
        """GET リクエスト。"""
        return self._send("GET", url)

    def post(self, url: str, payload: Any) -> httpx.Response:
        """POST リクエスト。payload は JSON として送信する。"""
        return self._send("POST", url, payload)

    def delete(self, url: str, payload: Any = None) -> httpx.Response:
        """DELETE リクエスト。payload がある場合のみ JSON ボディとして送信する。"""
        return self._send("DELETE", url, payload)
