"""エンドポイント単位のルート基底クラス。"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar, cast

from igdb_wrapper.query.builder import (
    IGDBQueryBuilder,
    QueryOptions,
    build_request_body,
    ids_condition,
)
from igdb_wrapper.query.fields import DEFAULT_FIELD_POLICY, DefaultFieldPolicy
from igdb_wrapper.request import IGDBRequestHandler

EntityT = TypeVar("EntityT")


class IGDBRouteBase(Generic[EntityT]):
    """1 エンドポイントに対する共通操作 (一覧・ID 指定・検索)。"""

    endpoint: ClassVar[str]

    def __init__(
        self,
        request_handler: IGDBRequestHandler,
        default_fields: DefaultFieldPolicy = DEFAULT_FIELD_POLICY,
    ) -> None:
        self._request_handler = request_handler
        self._default_fields = default_fields

    @property
    def default_fields(self) -> tuple[str, ...]:
        return self._default_fields.fields_for(self.endpoint)

    def query(self) -> IGDBQueryBuilder:
        """このルート向けの空のビルダーを返す。"""

        return IGDBQueryBuilder()

    def build_body(self, options: QueryOptions | None = None) -> str:
        return build_request_body(options or QueryOptions(), self.default_fields)

    async def _request(self, options: QueryOptions | None = None) -> Any:
        return await self._request_handler.post(self.endpoint, self.build_body(options))

    async def get_all(self, options: QueryOptions | None = None) -> list[EntityT]:
        return cast(list[EntityT], await self._request(options))

    async def get_by_id(
        self, entity_id: int, options: QueryOptions | None = None
    ) -> EntityT | None:
        """ID で 1 件取得する。該当が無ければ None。"""

        base = options or QueryOptions()
        result = await self._request(base.merge(where=f"id = {entity_id}", search=None, limit=1))
        return self._first(result)

    async def search(self, term: str, options: QueryOptions | None = None) -> list[EntityT]:
        base = options or QueryOptions()
        return cast(list[EntityT], await self._request(base.merge(search=term)))

    async def get_by_ids(
        self, ids: Sequence[int], options: QueryOptions | None = None
    ) -> list[EntityT]:
        if not ids:
            return []
        base = options or QueryOptions()
        return cast(list[EntityT], await self._request(base.merge(where=ids_condition(ids))))

    async def execute(self, builder: IGDBQueryBuilder) -> list[EntityT]:
        """ビルダーのクエリをそのまま送信する (デフォルトフィールドは付与しない)。"""

        return cast(list[EntityT], await self._request_handler.post(self.endpoint, builder.build()))

    @staticmethod
    def _first(result: Any) -> EntityT | None:
        if isinstance(result, list) and result:
            return cast(EntityT, result[0])
        return None


__all__ = ["IGDBRouteBase"]
