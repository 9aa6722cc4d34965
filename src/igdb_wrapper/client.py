"""IGDB API クライアントのファサード。"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from types import TracebackType

import httpx

from igdb_wrapper.auth import IGDBTokenManager, TwitchOAuthClient, check_credentials
from igdb_wrapper.query.fields import DEFAULT_FIELD_POLICY, DefaultFieldPolicy
from igdb_wrapper.request import IGDBRequestHandler
from igdb_wrapper.routes import CompaniesRoute, GamesRoute, GenresRoute, PlatformsRoute
from igdb_wrapper.shared.config import (
    IGDB_API_URL,
    TOKEN_SAFETY_BUFFER_SECONDS,
    TWITCH_TOKEN_URL,
    AppSettings,
    get_settings,
)
from igdb_wrapper.shared.logging import get_logger


class IGDBClient:
    """資格情報からトークン管理・リクエスト・各ルートを組み立てる。

    `http_client` を渡さない場合は内部で `httpx.AsyncClient` を生成し、
    `aclose()` (または `async with`) で閉じる::

        async with IGDBClient(client_id="...", client_secret="...") as igdb:
            games = await igdb.games.search_games("Zelda", QueryOptions(limit=3))
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        http_client: httpx.AsyncClient | None = None,
        token_url: str = TWITCH_TOKEN_URL,
        api_url: str = IGDB_API_URL,
        refresh_margin: timedelta = timedelta(seconds=TOKEN_SAFETY_BUFFER_SECONDS),
        timeout: float = 10.0,
        default_fields: DefaultFieldPolicy = DEFAULT_FIELD_POLICY,
        clock: Callable[[], datetime] | None = None,
        logger=None,
    ) -> None:
        check_credentials(client_id, client_secret)
        self._logger = logger or get_logger(__name__)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

        oauth_client = TwitchOAuthClient(
            client_id=client_id,
            client_secret=client_secret,
            http_client=self._http_client,
            token_url=token_url,
            timeout=timeout,
        )
        self._token_manager = IGDBTokenManager(
            oauth_client=oauth_client,
            refresh_margin=refresh_margin,
            clock=clock,
            logger=self._logger,
        )
        self._request_handler = IGDBRequestHandler(
            client_id=client_id,
            token_manager=self._token_manager,
            http_client=self._http_client,
            api_url=api_url,
            timeout=timeout,
            logger=self._logger,
        )

        self.games = GamesRoute(self._request_handler, default_fields)
        self.genres = GenresRoute(self._request_handler, default_fields)
        self.companies = CompaniesRoute(self._request_handler, default_fields)
        self.platforms = PlatformsRoute(self._request_handler, default_fields)

    @property
    def token_manager(self) -> IGDBTokenManager:
        return self._token_manager

    @property
    def request_handler(self) -> IGDBRequestHandler:
        return self._request_handler

    def has_valid_token(self) -> bool:
        return self._token_manager.has_valid_token()

    async def refresh_token(self) -> None:
        """有効なトークンが無ければ取得する。"""

        await self._token_manager.get_valid_token()

    def clear_token(self) -> None:
        self._token_manager.clear_token()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> IGDBClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()


def build_igdb_client(
    *,
    settings: AppSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
    default_fields: DefaultFieldPolicy = DEFAULT_FIELD_POLICY,
    logger=None,
) -> IGDBClient:
    """共有設定から IGDB クライアントを構築するファクトリ。"""

    app_settings = settings or get_settings()
    igdb_settings = app_settings.igdb
    return IGDBClient(
        client_id=igdb_settings.client_id,
        client_secret=igdb_settings.client_secret.get_secret_value(),
        http_client=http_client,
        token_url=str(igdb_settings.token_url),
        api_url=str(igdb_settings.api_url),
        refresh_margin=timedelta(seconds=igdb_settings.refresh_margin_seconds),
        timeout=igdb_settings.timeout_seconds,
        default_fields=default_fields,
        logger=logger,
    )


__all__ = ["IGDBClient", "build_igdb_client"]
