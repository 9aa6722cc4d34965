"""`companies` エンドポイントのルート。"""

from __future__ import annotations

from collections.abc import Sequence

from igdb_wrapper.models import Company
from igdb_wrapper.query.builder import QueryOptions

from .base import IGDBRouteBase


class CompaniesRoute(IGDBRouteBase[Company]):
    endpoint = "companies"

    async def get_companies(self, options: QueryOptions | None = None) -> list[Company]:
        return await self.get_all(options)

    async def get_company(
        self, company_id: int, options: QueryOptions | None = None
    ) -> Company | None:
        return await self.get_by_id(company_id, options)

    async def search_companies(
        self, term: str, options: QueryOptions | None = None
    ) -> list[Company]:
        return await self.search(term, options)

    async def get_companies_by_ids(
        self, ids: Sequence[int], options: QueryOptions | None = None
    ) -> list[Company]:
        return await self.get_by_ids(ids, options)

    async def get_all_companies_sorted(self, options: QueryOptions | None = None) -> list[Company]:
        base = options or QueryOptions()
        return await self.get_all(base.merge(sort="name asc"))

    async def get_companies_by_country(
        self, country_code: int, options: QueryOptions | None = None
    ) -> list[Company]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where(f"country = {country_code}"))

    async def get_developer_companies(self, options: QueryOptions | None = None) -> list[Company]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where("developed != null"))

    async def get_publisher_companies(self, options: QueryOptions | None = None) -> list[Company]:
        base = options or QueryOptions()
        return await self.get_all(base.and_where("published != null"))


__all__ = ["CompaniesRoute"]
