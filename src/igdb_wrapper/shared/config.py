"""環境変数・`.env` からクライアント設定を読み込む。"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

EnvName = Literal["local", "test", "staging", "production"]

TWITCH_TOKEN_URL = "https://id.twitch.tv/oauth2/token"
IGDB_API_URL = "https://api.igdb.com/v4"
TOKEN_SAFETY_BUFFER_SECONDS = 300


class IGDBSettings(BaseModel):
    """IGDB API / Twitch OAuth2 の資格情報と接続設定。"""

    client_id: str = Field(..., min_length=1, description="Twitch application client id")
    client_secret: SecretStr = Field(..., description="Twitch application client secret")
    token_url: AnyHttpUrl = Field(TWITCH_TOKEN_URL, description="Twitch OAuth2 token endpoint")
    api_url: AnyHttpUrl = Field(IGDB_API_URL, description="IGDB API v4 base URL")
    refresh_margin_seconds: int = Field(
        TOKEN_SAFETY_BUFFER_SECONDS,
        ge=0,
        description="アクセストークン有効期限のこの秒数前になったら再取得する",
    )
    timeout_seconds: float = Field(10.0, gt=0, description="HTTP リクエストのタイムアウト秒数")


class AppSettings(BaseSettings):
    """共有設定。`.env` 読み込みと環境変数バリデーションを担う。"""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: EnvName = Field("local", description="実行環境識別子")
    log_level: str = Field("INFO", description="ルートロガーのログレベル")
    igdb: IGDBSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """設定をロードし、再利用する。

    LRU キャッシュによりプロセス内での重複読み込みを防ぎ、
    `pytest` などから `get_settings.cache_clear()` を呼び出すことで再読込できる。
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "EnvName",
    "IGDBSettings",
    "IGDB_API_URL",
    "TOKEN_SAFETY_BUFFER_SECONDS",
    "TWITCH_TOKEN_URL",
    "get_settings",
]
