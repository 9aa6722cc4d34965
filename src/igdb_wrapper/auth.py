"""Twitch OAuth2 (client credentials) によるアクセストークン管理。"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import cast

import httpx

from igdb_wrapper.models import TokenResponse
from igdb_wrapper.shared.config import TOKEN_SAFETY_BUFFER_SECONDS, TWITCH_TOKEN_URL
from igdb_wrapper.shared.exceptions import ConfigurationError, IGDBClientError
from igdb_wrapper.shared.logging import get_logger
from igdb_wrapper.shared.types import utc_now


class TokenRefreshError(IGDBClientError):
    """アクセストークンの取得に失敗した際の例外。"""

    default_message = "Token refresh failed"


class TokenState(Enum):
    """トークンマネージャーの状態。"""

    NO_TOKEN = "no_token"
    VALID = "valid"
    REFRESHING = "refreshing"


@dataclass(slots=True, frozen=True)
class IGDBAccessToken:
    """IGDB API へアクセスするためのアクセストークン。"""

    access_token: str
    expires_at: datetime
    token_type: str = "bearer"

    def is_valid(self, now: datetime) -> bool:
        return now < self.expires_at


def check_credentials(client_id: str | None, client_secret: str | None) -> None:
    """資格情報が揃っていることを確認する。ネットワークアクセスは行わない。"""

    missing = [
        name
        for name, value in (("client_id", client_id), ("client_secret", client_secret))
        if not value
    ]
    if missing:
        msg = f"Missing required IGDB credentials: {', '.join(missing)}"
        raise ConfigurationError(msg)


class TwitchOAuthClient:
    """Twitch OAuth2 のトークンエンドポイントを呼び出すクライアント。"""

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        http_client: httpx.AsyncClient,
        token_url: str = TWITCH_TOKEN_URL,
        timeout: float = 10.0,
    ) -> None:
        check_credentials(client_id, client_secret)
        self._client_id = client_id
        self._client_secret = client_secret
        self._http_client = http_client
        self._token_url = token_url
        self._timeout = timeout

    async def fetch_app_access_token(self) -> TokenResponse:
        """トークンレスポンスの JSON をそのまま返す。"""

        response = await self._http_client.post(
            self._token_url,
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "grant_type": "client_credentials",
            },
            headers={"Accept": "application/json"},
            timeout=self._timeout,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("Token response must be a JSON object")
        if not isinstance(payload.get("access_token"), str):
            raise ValueError("Token response is missing `access_token`")
        if not isinstance(payload.get("expires_in"), (int, float)):
            raise ValueError("Token response is missing `expires_in`")
        return cast(TokenResponse, payload)


class IGDBTokenManager:
    """アクセストークンのキャッシュと単一フライトでの更新を行う。

    トークンが無い・期限切れの状態で複数のコルーチンが同時に
    `get_valid_token()` を呼んでも、トークンエンドポイントへの
    リクエストは 1 回だけ行われ、全員が同じ結果 (または同じ例外) を受け取る。
    `get_valid_token()` の判定から更新タスク生成までの間に `await` は無いため、
    単一イベントループ上ではロック無しで単一フライトが保証される。
    """

    def __init__(
        self,
        *,
        oauth_client: TwitchOAuthClient,
        refresh_margin: timedelta = timedelta(seconds=TOKEN_SAFETY_BUFFER_SECONDS),
        clock: Callable[[], datetime] | None = None,
        logger=None,
    ) -> None:
        self._oauth_client = oauth_client
        self._refresh_margin = refresh_margin
        self._clock = clock or utc_now
        self._logger = logger or get_logger(__name__)
        self._token: IGDBAccessToken | None = None
        self._refresh_task: asyncio.Task[str] | None = None

    @property
    def state(self) -> TokenState:
        if self._refresh_task is not None:
            return TokenState.REFRESHING
        if self.has_valid_token():
            return TokenState.VALID
        return TokenState.NO_TOKEN

    @property
    def expires_at(self) -> datetime | None:
        return self._token.expires_at if self._token else None

    async def get_valid_token(self) -> str:
        """有効なアクセストークンを返す。必要であれば更新する。"""

        if self._token is not None and self.has_valid_token():
            return self._token.access_token

        task = self._refresh_task
        if task is None:
            task = asyncio.get_running_loop().create_task(self._refresh())
            self._refresh_task = task
        # 呼び出し側のキャンセルで共有タスクが止まらないようにする
        return await asyncio.shield(task)

    def has_valid_token(self) -> bool:
        return self._token is not None and self._token.is_valid(self._clock())

    def get_current_token(self) -> str | None:
        """更新は行わず、有効なトークンがあれば返す。"""

        if self._token is not None and self.has_valid_token():
            return self._token.access_token
        return None

    def clear_token(self) -> None:
        """保持しているトークンと実行中の更新ハンドルを破棄する。"""

        self._token = None
        self._refresh_task = None
        self._logger.debug("igdb_token_cleared")

    async def _refresh(self) -> str:
        self._logger.debug("igdb_token_refresh_started")
        try:
            payload = await self._oauth_client.fetch_app_access_token()
            expires_in = int(payload["expires_in"])
            token = IGDBAccessToken(
                access_token=payload["access_token"],
                expires_at=self._clock() + timedelta(seconds=expires_in) - self._refresh_margin,
                token_type=str(payload.get("token_type", "bearer")),
            )
        except Exception as exc:
            if self._owns_refresh():
                self._token = None
            self._logger.warning("igdb_token_refresh_failed", error=str(exc))
            raise TokenRefreshError(f"Token refresh failed: {exc}") from exc
        else:
            if self._owns_refresh():
                self._token = token
            self._logger.info(
                "igdb_token_refreshed",
                expires_at=token.expires_at.isoformat(),
                token_type=token.token_type,
            )
            return token.access_token
        finally:
            if self._owns_refresh():
                self._refresh_task = None

    def _owns_refresh(self) -> bool:
        # clear_token() 後に開始された別の更新を上書きしない
        return self._refresh_task is asyncio.current_task()


__all__ = [
    "IGDBAccessToken",
    "IGDBTokenManager",
    "TokenRefreshError",
    "TokenState",
    "TwitchOAuthClient",
    "check_credentials",
]
