"""`games` エンドポイント向けの絞り込み関数。

いずれもビルダーを第 1 引数に取り、条件を追加したビルダーを返す::

    builder.apply(games.by_genre, 12).apply(games.popular)
"""

from __future__ import annotations

from typing import Literal

from igdb_wrapper.shared.types import unix_now

from .builder import IGDBQueryBuilder

CompanyRole = Literal["developer", "publisher", "both"]

SECONDS_PER_DAY = 24 * 60 * 60


def by_genre(builder: IGDBQueryBuilder, genre_id: int) -> IGDBQueryBuilder:
    return builder.where(f"genres = {genre_id}")


def by_platform(builder: IGDBQueryBuilder, platform_id: int) -> IGDBQueryBuilder:
    return builder.where(f"platforms = {platform_id}")


def by_rating(
    builder: IGDBQueryBuilder, minimum: float, maximum: float | None = None
) -> IGDBQueryBuilder:
    """評価値で絞り込む。`maximum` 省略時は上限なし。"""

    if maximum is not None:
        return builder.where(f"rating >= {minimum} & rating <= {maximum}")
    return builder.where(f"rating >= {minimum}")


def by_release_date(
    builder: IGDBQueryBuilder, start: int, end: int | None = None
) -> IGDBQueryBuilder:
    """初回リリース日 (Unix 秒) で絞り込む。`end` 省略時は上限なし。"""

    if end is not None:
        return builder.where(f"first_release_date >= {start} & first_release_date <= {end}")
    return builder.where(f"first_release_date >= {start}")


def by_company(
    builder: IGDBQueryBuilder, company_id: int, role: CompanyRole = "both"
) -> IGDBQueryBuilder:
    if role == "developer":
        return builder.where(
            f"involved_companies.developer = true & involved_companies.company = {company_id}"
        )
    if role == "publisher":
        return builder.where(
            f"involved_companies.publisher = true & involved_companies.company = {company_id}"
        )
    return builder.where(f"involved_companies.company = {company_id}")


def popular(builder: IGDBQueryBuilder) -> IGDBQueryBuilder:
    """総合評価の高い順。評価の無いゲームは除外する。"""

    return builder.sort_by("total_rating", "desc").where("total_rating != null")


def recent(builder: IGDBQueryBuilder, days: int = 30, *, now: int | None = None) -> IGDBQueryBuilder:
    """直近 `days` 日以内にリリースされたゲームを新しい順に並べる。"""

    current = unix_now() if now is None else now
    start = current - days * SECONDS_PER_DAY
    return by_release_date(builder, start, current).sort_by("first_release_date", "desc")


def upcoming(builder: IGDBQueryBuilder, *, now: int | None = None) -> IGDBQueryBuilder:
    current = unix_now() if now is None else now
    return by_release_date(builder, current).sort_by("first_release_date", "asc")


__all__ = [
    "CompanyRole",
    "SECONDS_PER_DAY",
    "by_company",
    "by_genre",
    "by_platform",
    "by_rating",
    "by_release_date",
    "popular",
    "recent",
    "upcoming",
]
