"""HTTP アダプター設定（pydantic BaseModel）"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import FeatureFlagError, FeatureFlagErrorCodes

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class BasicAuthConfig(BaseModel):
    """Basic 認証設定。"""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    password: str | None = None


class HttpAdapterConfig(BaseModel):
    """HTTP アダプター設定。

    アダプター生成時に渡し、以降は読み取り専用として全リクエストで共有する。
    frozen のため生成後の変更は ValidationError になる。
    """

    model_config = ConfigDict(frozen=True)

    headers: dict[str, str] = Field(default_factory=dict)
    basic_auth: BasicAuthConfig | None = None
    read_timeout: float | None = Field(default=None, gt=0)
    open_timeout: float | None = Field(default=None, gt=0)

    def merged_headers(self) -> dict[str, str]:
        """デフォルトヘッダーに設定ヘッダーを上書きしたものを返す。"""
        return {**DEFAULT_HEADERS, **self.headers}

    @property
    def auth(self) -> tuple[str, str] | None:
        """ユーザー名とパスワードが両方設定されている場合のみ認証情報を返す。空文字列も設定済みとみなす。"""
        if self.basic_auth is None:
            return None
        if self.basic_auth.username is not None and self.basic_auth.password is not None:
            return (self.basic_auth.username, self.basic_auth.password)
        return None


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    return data


def load_config(path: Path, section: str = "featureflag_http") -> HttpAdapterConfig:
    """YAML ファイルの指定セクションを読み込んで HttpAdapterConfig を返す。

    セクションが存在しない、または空の場合はデフォルト設定になる。
    """
    data = _read_yaml(path)
    try:
        return HttpAdapterConfig.model_validate(data.get(section) or {})
    except (ValidationError, AttributeError) as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
