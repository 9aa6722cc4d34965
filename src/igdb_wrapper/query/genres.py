"""`genres` エンドポイント向けの絞り込み関数。"""

from __future__ import annotations

from .builder import IGDBQueryBuilder


def by_name(builder: IGDBQueryBuilder, name: str) -> IGDBQueryBuilder:
    return builder.where(f'name = "{name}"')


def by_slug(builder: IGDBQueryBuilder, slug: str) -> IGDBQueryBuilder:
    return builder.where(f'slug = "{slug}"')


def search_by_name(builder: IGDBQueryBuilder, name: str) -> IGDBQueryBuilder:
    return builder.search(name)


__all__ = ["by_name", "by_slug", "search_by_name"]
