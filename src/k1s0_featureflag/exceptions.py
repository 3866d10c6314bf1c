"""featureflag ライブラリの例外型定義"""

from __future__ import annotations


class FeatureFlagError(Exception):
    """featureflag ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class FeatureFlagErrorCodes:
    """エラーコード定数。"""

    INVALID_GATE_KEY: str = "INVALID_GATE_KEY"
    UNEXPECTED_STATUS: str = "UNEXPECTED_STATUS"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"
    READ_FILE: str = "READ_FILE"
    PARSE_YAML: str = "PARSE_YAML"
    CONFIG_ERROR: str = "CONFIG_ERROR"
