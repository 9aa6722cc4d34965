"""ライブラリ共通の例外階層。"""

from __future__ import annotations


class BaseAppError(Exception):
    """全レイヤで共有するベース例外。"""

    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(BaseAppError):
    """資格情報や設定の不足・不正を示すエラー。"""

    default_message = "Configuration is invalid or missing"


class IGDBClientError(BaseAppError):
    """IGDB クライアント共通の例外。"""

    default_message = "IGDB client error"


__all__ = [
    "BaseAppError",
    "ConfigurationError",
    "IGDBClientError",
]
