"""IGDBClient ファサードと設定からの構築を検証する。"""

from __future__ import annotations

import httpx
import pytest

from igdb_wrapper import ConfigurationError, IGDBClient, TokenState, build_igdb_client
from igdb_wrapper.shared.config import AppSettings, IGDBSettings


@pytest.mark.parametrize(("client_id", "client_secret"), [("", "secret"), ("cid", "")])
def test_missing_credentials_raise_before_network(client_id: str, client_secret: str) -> None:
    with pytest.raises(ConfigurationError, match="Missing required IGDB credentials"):
        IGDBClient(client_id=client_id, client_secret=client_secret)


@pytest.mark.asyncio
async def test_token_controls(igdb_client: IGDBClient, fake_server) -> None:
    assert not igdb_client.has_valid_token()

    await igdb_client.refresh_token()
    await igdb_client.refresh_token()

    assert igdb_client.has_valid_token()
    assert len(fake_server.token_requests) == 1

    igdb_client.clear_token()

    assert igdb_client.token_manager.state is TokenState.NO_TOKEN
    await igdb_client.refresh_token()
    assert len(fake_server.token_requests) == 2


@pytest.mark.asyncio
async def test_request_handler_is_shared_by_routes(igdb_client: IGDBClient, fake_server) -> None:
    await igdb_client.request_handler.post("games", "fields id;")
    await igdb_client.genres.get_genres()

    assert len(fake_server.token_requests) == 1
    assert [str(r.url) for r in fake_server.api_requests] == [
        "https://api.igdb.com/v4/games",
        "https://api.igdb.com/v4/genres",
    ]


@pytest.mark.asyncio
async def test_external_http_client_is_not_closed(http_client: httpx.AsyncClient) -> None:
    async with IGDBClient(client_id="cid", client_secret="secret", http_client=http_client):
        pass

    assert not http_client.is_closed


@pytest.mark.asyncio
async def test_owned_http_client_is_closed() -> None:
    client = IGDBClient(client_id="cid", client_secret="secret")

    await client.aclose()

    assert client._http_client.is_closed  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_build_from_settings(http_client: httpx.AsyncClient, fake_server) -> None:
    settings = AppSettings(
        igdb=IGDBSettings(
            client_id="settings-cid",
            client_secret="settings-secret",
            api_url="https://igdb.example.com/v4",
        )
    )

    async with build_igdb_client(settings=settings, http_client=http_client) as client:
        await client.games.get_games()

    assert fake_server.token_form()["client_id"] == ["settings-cid"]
    assert fake_server.token_form()["client_secret"] == ["settings-secret"]
    request = fake_server.api_requests[0]
    assert str(request.url) == "https://igdb.example.com/v4/games"
    assert request.headers["Client-ID"] == "settings-cid"
