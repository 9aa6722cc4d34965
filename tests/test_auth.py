"""IGDBTokenManager のキャッシュと単一フライト更新を検証する。"""

from __future__ import annotations

import asyncio
from datetime import timedelta

import httpx
import pytest

from igdb_wrapper.auth import (
    IGDBTokenManager,
    TokenRefreshError,
    TokenState,
    TwitchOAuthClient,
)
from igdb_wrapper.shared.exceptions import ConfigurationError


def _build_manager(http_client: httpx.AsyncClient, clock, **kwargs) -> IGDBTokenManager:
    oauth_client = TwitchOAuthClient(
        client_id="cid",
        client_secret="secret",
        http_client=http_client,
    )
    return IGDBTokenManager(oauth_client=oauth_client, clock=clock, **kwargs)


@pytest.mark.asyncio
async def test_concurrent_callers_share_single_refresh(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock)

    tokens = await asyncio.gather(*(manager.get_valid_token() for _ in range(10)))

    assert len(fake_server.token_requests) == 1
    assert set(tokens) == {"token-1"}
    assert manager.state is TokenState.VALID


@pytest.mark.asyncio
async def test_state_is_refreshing_while_request_in_flight(
    http_client, fake_server, fake_clock
) -> None:
    manager = _build_manager(http_client, fake_clock)
    assert manager.state is TokenState.NO_TOKEN

    pending = asyncio.ensure_future(manager.get_valid_token())
    await asyncio.sleep(0)

    assert manager.state is TokenState.REFRESHING
    assert await pending == "token-1"
    assert manager.state is TokenState.VALID


@pytest.mark.asyncio
async def test_token_request_uses_client_credentials_form(
    http_client, fake_server, fake_clock
) -> None:
    manager = _build_manager(http_client, fake_clock)

    await manager.get_valid_token()

    request = fake_server.token_requests[0]
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert fake_server.token_form() == {
        "client_id": ["cid"],
        "client_secret": ["secret"],
        "grant_type": ["client_credentials"],
    }


@pytest.mark.asyncio
async def test_valid_token_is_cached_until_expiry(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock)

    first = await manager.get_valid_token()
    second = await manager.get_valid_token()

    assert first == second == "token-1"
    assert len(fake_server.token_requests) == 1
    assert manager.get_current_token() == "token-1"


@pytest.mark.asyncio
async def test_expiry_applies_safety_buffer(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock)
    started = fake_clock.now

    await manager.get_valid_token()

    assert manager.expires_at == started + timedelta(seconds=3600 - 300)

    fake_clock.advance(3600 - 300 - 1)
    assert manager.has_valid_token()

    fake_clock.advance(1)
    assert not manager.has_valid_token()
    assert manager.get_current_token() is None
    assert len(fake_server.token_requests) == 1

    assert await manager.get_valid_token() == "token-2"
    assert len(fake_server.token_requests) == 2


@pytest.mark.asyncio
async def test_custom_refresh_margin(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock, refresh_margin=timedelta(seconds=60))
    started = fake_clock.now

    await manager.get_valid_token()

    assert manager.expires_at == started + timedelta(seconds=3600 - 60)


@pytest.mark.asyncio
async def test_clear_token_forces_new_refresh(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock)
    await manager.get_valid_token()

    manager.clear_token()

    assert manager.state is TokenState.NO_TOKEN
    assert manager.get_current_token() is None
    assert await manager.get_valid_token() == "token-2"
    assert len(fake_server.token_requests) == 2


@pytest.mark.asyncio
async def test_clear_during_refresh_starts_independent_refresh(
    http_client, fake_server, fake_clock
) -> None:
    manager = _build_manager(http_client, fake_clock)

    first = asyncio.ensure_future(manager.get_valid_token())
    await asyncio.sleep(0)
    assert manager.state is TokenState.REFRESHING

    manager.clear_token()
    second = asyncio.ensure_future(manager.get_valid_token())

    # 破棄済みの更新は待機者に結果を返すが、保持トークンは上書きしない
    assert await first == "token-1"
    assert await second == "token-2"
    assert manager.get_current_token() == "token-2"
    assert len(fake_server.token_requests) == 2
    assert manager.state is TokenState.VALID


@pytest.mark.asyncio
async def test_unexpected_transport_failure_is_refresh_error(
    http_client, fake_server, fake_clock
) -> None:
    manager = _build_manager(http_client, fake_clock)
    await manager.get_valid_token()
    fake_clock.advance(3600)
    fake_server.token_responses.append(RuntimeError("transport exploded"))

    with pytest.raises(TokenRefreshError) as exc_info:
        await manager.get_valid_token()

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert manager.expires_at is None
    assert manager.state is TokenState.NO_TOKEN


@pytest.mark.asyncio
async def test_failed_refresh_propagates_to_all_waiters_and_recovers(
    http_client, fake_server, fake_clock
) -> None:
    fake_server.token_responses.append(httpx.Response(400, json={"message": "invalid client"}))
    manager = _build_manager(http_client, fake_clock)

    results = await asyncio.gather(
        *(manager.get_valid_token() for _ in range(3)), return_exceptions=True
    )

    assert len(fake_server.token_requests) == 1
    assert all(isinstance(result, TokenRefreshError) for result in results)
    assert isinstance(results[0].__cause__, httpx.HTTPStatusError)
    assert manager.state is TokenState.NO_TOKEN
    assert not manager.has_valid_token()

    assert await manager.get_valid_token() == "token-2"
    assert len(fake_server.token_requests) == 2


@pytest.mark.asyncio
async def test_failed_refresh_clears_previous_token(http_client, fake_server, fake_clock) -> None:
    manager = _build_manager(http_client, fake_clock)
    await manager.get_valid_token()
    fake_clock.advance(3600)
    fake_server.token_responses.append(httpx.ConnectError("connection refused"))

    with pytest.raises(TokenRefreshError) as exc_info:
        await manager.get_valid_token()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert manager.expires_at is None
    assert manager.state is TokenState.NO_TOKEN


@pytest.mark.asyncio
async def test_malformed_token_payload_is_refresh_error(
    http_client, fake_server, fake_clock
) -> None:
    fake_server.token_responses.append(httpx.Response(200, json={"token_type": "bearer"}))
    manager = _build_manager(http_client, fake_clock)

    with pytest.raises(TokenRefreshError):
        await manager.get_valid_token()

    assert manager.state is TokenState.NO_TOKEN


@pytest.mark.parametrize(
    "client_id, client_secret",
    [("", "secret"), ("cid", ""), ("", "")],
)
def test_missing_credentials_fail_fast(client_id: str, client_secret: str) -> None:
    transport = httpx.MockTransport(lambda _request: pytest.fail("network must not be used"))
    with pytest.raises(ConfigurationError):
        TwitchOAuthClient(
            client_id=client_id,
            client_secret=client_secret,
            http_client=httpx.AsyncClient(transport=transport),
        )
