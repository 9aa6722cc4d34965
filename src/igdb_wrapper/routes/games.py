"""`games` エンドポイントのルート。"""

from __future__ import annotations

from collections.abc import Sequence

from igdb_wrapper.models import Game
from igdb_wrapper.query.builder import QueryOptions
from igdb_wrapper.query.games import SECONDS_PER_DAY
from igdb_wrapper.shared.types import unix_now

from .base import IGDBRouteBase


class GamesRoute(IGDBRouteBase[Game]):
    endpoint = "games"

    async def get_games(self, options: QueryOptions | None = None) -> list[Game]:
        return await self.get_all(options)

    async def get_game(self, game_id: int, options: QueryOptions | None = None) -> Game | None:
        return await self.get_by_id(game_id, options)

    async def search_games(self, term: str, options: QueryOptions | None = None) -> list[Game]:
        return await self.search(term, options)

    async def get_games_by_ids(
        self, ids: Sequence[int], options: QueryOptions | None = None
    ) -> list[Game]:
        return await self.get_by_ids(ids, options)

    async def get_popular_games(self, options: QueryOptions | None = None) -> list[Game]:
        """総合評価の高い順。呼び出し側の `where` には条件を AND で追加する。"""

        base = options or QueryOptions()
        return await self.get_all(
            base.and_where("total_rating != null").merge(sort="total_rating desc")
        )

    async def get_recent_games(
        self,
        options: QueryOptions | None = None,
        *,
        days: int = 30,
        now: int | None = None,
    ) -> list[Game]:
        current = unix_now() if now is None else now
        start = current - days * SECONDS_PER_DAY
        base = options or QueryOptions()
        return await self.get_all(
            base.merge(
                sort="first_release_date desc",
                where=f"first_release_date >= {start} & first_release_date <= {current}",
            )
        )

    async def get_upcoming_games(
        self, options: QueryOptions | None = None, *, now: int | None = None
    ) -> list[Game]:
        current = unix_now() if now is None else now
        base = options or QueryOptions()
        return await self.get_all(
            base.merge(sort="first_release_date asc", where=f"first_release_date > {current}")
        )

    async def get_games_by_genre(
        self, genre_id: int, options: QueryOptions | None = None
    ) -> list[Game]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where(f"genres = {genre_id}"))

    async def get_games_by_platform(
        self, platform_id: int, options: QueryOptions | None = None
    ) -> list[Game]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where(f"platforms = {platform_id}"))


__all__ = ["GamesRoute"]
