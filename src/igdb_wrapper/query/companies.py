"""`companies` エンドポイント向けの絞り込み関数。"""

from __future__ import annotations

from .builder import IGDBQueryBuilder


def by_country(builder: IGDBQueryBuilder, country_code: int) -> IGDBQueryBuilder:
    """ISO 3166-1 の数値国コードで絞り込む。"""

    return builder.where(f"country = {country_code}")


def developers(builder: IGDBQueryBuilder) -> IGDBQueryBuilder:
    return builder.where("developed != null")


def publishers(builder: IGDBQueryBuilder) -> IGDBQueryBuilder:
    return builder.where("published != null")


def search_by_name(builder: IGDBQueryBuilder, name: str) -> IGDBQueryBuilder:
    return builder.search(name)


__all__ = ["by_country", "developers", "publishers", "search_by_name"]
