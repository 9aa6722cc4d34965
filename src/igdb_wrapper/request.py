"""認証付きで IGDB API を呼び出すリクエストハンドラー。"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Literal

import httpx

from igdb_wrapper.auth import IGDBTokenManager
from igdb_wrapper.shared.config import IGDB_API_URL
from igdb_wrapper.shared.exceptions import IGDBClientError
from igdb_wrapper.shared.logging import get_logger

HTTPMethod = Literal["GET", "POST"]


class IGDBRequestError(IGDBClientError):
    """IGDB API が成功以外のステータスを返した。リトライはしない。"""

    def __init__(self, status_code: int, reason: str, body: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        details = f" - {body}" if body else ""
        super().__init__(f"IGDB API request failed: {status_code} {reason}{details}")


class IGDBDecodeError(IGDBClientError, ValueError):
    """レスポンスボディを JSON として解釈できない。"""

    default_message = "Failed to decode IGDB response"


def _read_body(response: httpx.Response) -> str | None:
    try:
        text = response.text
    except (UnicodeDecodeError, LookupError):
        return None
    return text.strip() or None


class IGDBRequestHandler:
    """トークンマネージャーから取得したトークンで 1 回だけリクエストを送る。"""

    def __init__(
        self,
        *,
        client_id: str,
        token_manager: IGDBTokenManager,
        http_client: httpx.AsyncClient,
        api_url: str = IGDB_API_URL,
        timeout: float = 10.0,
        logger=None,
    ) -> None:
        self._client_id = client_id
        self._token_manager = token_manager
        self._http_client = http_client
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger or get_logger(__name__)

    async def request(
        self,
        endpoint: str,
        *,
        body: str | None = None,
        method: HTTPMethod = "POST",
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        token = await self._token_manager.get_valid_token()
        url = f"{self._api_url}/{endpoint}"
        request_headers = {
            "Client-ID": self._client_id,
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            **(headers or {}),
        }

        self._logger.debug("igdb_request", method=method, endpoint=endpoint, query=body)
        response = await self._http_client.request(
            method,
            url,
            headers=request_headers,
            content=body or None,
            params=params,
            timeout=self._timeout,
        )

        if response.is_success:
            return response

        error = IGDBRequestError(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=_read_body(response),
        )
        self._logger.warning(
            "igdb_request_failed",
            endpoint=endpoint,
            status_code=error.status_code,
            body=error.body,
        )
        raise error

    async def post(self, endpoint: str, query: str) -> Any:
        """APIcalypse クエリを POST し、デコード済み JSON を返す。"""

        response = await self.request(endpoint, method="POST", body=query)
        return self._decode(response)

    async def get(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        response = await self.request(endpoint, method="GET", params=params)
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise IGDBDecodeError(f"Failed to decode IGDB response: {exc}") from exc


__all__ = [
    "HTTPMethod",
    "IGDBDecodeError",
    "IGDBRequestError",
    "IGDBRequestHandler",
]
