"""`platforms` エンドポイント向けの絞り込み関数。"""

from __future__ import annotations

from .builder import IGDBQueryBuilder


def by_category(builder: IGDBQueryBuilder, category_id: int) -> IGDBQueryBuilder:
    return builder.where(f"category = {category_id}")


def by_generation(builder: IGDBQueryBuilder, generation: int) -> IGDBQueryBuilder:
    return builder.where(f"generation = {generation}")


def search_by_name(builder: IGDBQueryBuilder, name: str) -> IGDBQueryBuilder:
    return builder.search(name)


__all__ = ["by_category", "by_generation", "search_by_name"]
