"""HTTP 通信をスタブ化する共通フィクスチャ。"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest
import pytest_asyncio

from igdb_wrapper import IGDBClient

TOKEN_URL = "https://id.twitch.tv/oauth2/token"
API_URL = "https://api.igdb.com/v4"


class FakeClock:
    """テストから時刻を進められる時計。"""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@dataclass
class FakeIGDBServer:
    """Twitch トークンエンドポイントと IGDB API を模倣する。

    `token_responses` / `api_responses` に積んだレスポンスを先頭から返す。
    キューが空になった場合、トークンは連番で発行し、API は空配列を返す。
    """

    token_responses: list[httpx.Response | Exception] = field(default_factory=list)
    api_responses: list[httpx.Response | Exception] = field(default_factory=list)
    token_requests: list[httpx.Request] = field(default_factory=list)
    api_requests: list[httpx.Request] = field(default_factory=list)
    expires_in: int = 3600

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        # 他のコルーチンへ制御を渡し、並行呼び出しを再現する
        await asyncio.sleep(0)
        if str(request.url).startswith(TOKEN_URL):
            self.token_requests.append(request)
            return self._next(self.token_responses, self._issue_token)
        self.api_requests.append(request)
        return self._next(self.api_responses, lambda: httpx.Response(200, json=[]))

    def _issue_token(self) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "access_token": f"token-{len(self.token_requests)}",
                "expires_in": self.expires_in,
                "token_type": "bearer",
            },
        )

    @staticmethod
    def _next(queue: list[httpx.Response | Exception], default) -> httpx.Response:
        if not queue:
            return default()
        action = queue.pop(0)
        if isinstance(action, Exception):
            raise action
        return action

    def queue_json(self, payload: Any, status_code: int = 200) -> None:
        self.api_responses.append(httpx.Response(status_code, json=payload))

    def api_bodies(self) -> list[str]:
        return [request.content.decode() for request in self.api_requests]

    def token_form(self, index: int = 0) -> dict[str, list[str]]:
        return parse_qs(self.token_requests[index].content.decode())


@pytest.fixture()
def fake_server() -> FakeIGDBServer:
    return FakeIGDBServer()


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture()
async def http_client(fake_server: FakeIGDBServer) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_server)) as client:
        yield client


@pytest_asyncio.fixture()
async def igdb_client(
    http_client: httpx.AsyncClient, fake_clock: FakeClock
) -> AsyncIterator[IGDBClient]:
    client = IGDBClient(
        client_id="cid",
        client_secret="secret",
        http_client=http_client,
        clock=fake_clock,
    )
    async with client:
        yield client
