"""`genres` エンドポイントのルート。

genres エンドポイントは `search` をサポートしないため、名前での絞り込みは
`get_genres()` の結果をローカルで行うか `get_genre_by_slug()` を使う。
"""

from __future__ import annotations

from collections.abc import Sequence

from igdb_wrapper.models import Genre
from igdb_wrapper.query.builder import QueryOptions

from .base import IGDBRouteBase


class GenresRoute(IGDBRouteBase[Genre]):
    endpoint = "genres"

    async def get_genres(self, options: QueryOptions | None = None) -> list[Genre]:
        return await self.get_all(options)

    async def get_genre(self, genre_id: int, options: QueryOptions | None = None) -> Genre | None:
        return await self.get_by_id(genre_id, options)

    async def get_genres_by_ids(
        self, ids: Sequence[int], options: QueryOptions | None = None
    ) -> list[Genre]:
        return await self.get_by_ids(ids, options)

    async def get_all_genres_sorted(self, options: QueryOptions | None = None) -> list[Genre]:
        base = options or QueryOptions()
        return await self.get_all(base.merge(sort="name asc"))

    async def get_genre_by_slug(
        self, slug: str, options: QueryOptions | None = None
    ) -> Genre | None:
        base = options or QueryOptions()
        result = await self.get_all(base.merge(where=f'slug = "{slug}"', limit=1))
        return self._first(result)


__all__ = ["GenresRoute"]
