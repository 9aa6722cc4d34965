"""`platforms` エンドポイントのルート。"""

from __future__ import annotations

from collections.abc import Sequence

from igdb_wrapper.models import Platform
from igdb_wrapper.query.builder import QueryOptions

from .base import IGDBRouteBase


class PlatformsRoute(IGDBRouteBase[Platform]):
    endpoint = "platforms"

    async def get_platforms(self, options: QueryOptions | None = None) -> list[Platform]:
        return await self.get_all(options)

    async def get_platform(
        self, platform_id: int, options: QueryOptions | None = None
    ) -> Platform | None:
        return await self.get_by_id(platform_id, options)

    async def search_platforms(
        self, term: str, options: QueryOptions | None = None
    ) -> list[Platform]:
        return await self.search(term, options)

    async def get_platforms_by_ids(
        self, ids: Sequence[int], options: QueryOptions | None = None
    ) -> list[Platform]:
        return await self.get_by_ids(ids, options)

    async def get_platforms_by_generation(
        self, generation: int, options: QueryOptions | None = None
    ) -> list[Platform]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where(f"generation = {generation}"))


__all__ = ["PlatformsRoute"]
