"""エンドポイントごとのデフォルトフィールドとリクエストボディの組み立て。

`.*` で終わるフィールド (展開パス) を指定すると、関連エンティティが
数値 ID ではなくネストしたオブジェクトとして返る。デフォルトフィールドは
主要な関連を展開した状態で定義しているため、`include_default_fields=False`
を指定するかどうかでレスポンスの形が大きく変わる。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

MAX_LIMIT_PER_REQUEST = 500
MAX_OFFSET = 10_000

EXPANSION_SUFFIX = ".*"

_GAME_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "slug",
    "url",
    "summary",
    "storyline",
    "category",
    "status",
    "rating",
    "rating_count",
    "total_rating",
    "total_rating_count",
    "aggregated_rating",
    "first_release_date",
    "cover.*",
    "screenshots.*",
    "artworks.*",
    "videos.*",
    "genres.*",
    "themes.*",
    "game_modes.*",
    "platforms.*",
    "release_dates.*",
    "involved_companies.*",
    "involved_companies.company.*",
    "game_engines.*",
    "websites.*",
    "similar_games.*",
    "similar_games.cover.*",
)

_GENRE_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "slug",
    "url",
    "created_at",
    "updated_at",
)

_COMPANY_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "slug",
    "url",
    "description",
    "country",
    "start_date",
    "logo.*",
    "websites.*",
    "developed",
    "published",
    "parent",
)

_PLATFORM_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "slug",
    "url",
    "abbreviation",
    "alternative_name",
    "category",
    "generation",
    "summary",
    "platform_logo.*",
    "websites.*",
)


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def clamp_limit(value: int) -> int:
    """`limit` を IGDB が受け付ける 1〜500 に丸める。"""

    return clamp(int(value), 1, MAX_LIMIT_PER_REQUEST)


def clamp_offset(value: int) -> int:
    """`offset` を IGDB が受け付ける 0〜10000 に丸める。"""

    return clamp(int(value), 0, MAX_OFFSET)


@dataclass(slots=True, frozen=True)
class DefaultFieldPolicy:
    """エンドポイント名 → デフォルトフィールドの読み取り専用テーブル。"""

    table: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {endpoint: tuple(fields) for endpoint, fields in self.table.items()}
        object.__setattr__(self, "table", MappingProxyType(frozen))

    def fields_for(self, endpoint: str) -> tuple[str, ...]:
        return self.table.get(endpoint, ())

    def with_fields(self, endpoint: str, fields: Iterable[str]) -> DefaultFieldPolicy:
        """指定エンドポイントだけ差し替えた新しいポリシーを返す。"""

        return DefaultFieldPolicy({**self.table, endpoint: tuple(fields)})


DEFAULT_FIELD_POLICY = DefaultFieldPolicy(
    {
        "games": _GAME_FIELDS,
        "genres": _GENRE_FIELDS,
        "companies": _COMPANY_FIELDS,
        "platforms": _PLATFORM_FIELDS,
    }
)


def merge_fields(
    fields: Iterable[str],
    defaults: Iterable[str],
    *,
    include_defaults: bool = True,
) -> tuple[str, ...]:
    """呼び出し側のフィールドにデフォルトを連結し、重複と空文字を除く。

    最初に現れた位置を維持する。
    """

    selected = list(fields)
    if include_defaults:
        selected.extend(defaults)
    return tuple(name for name in dict.fromkeys(selected) if name)


def is_expanded_field(name: str) -> bool:
    """`genres.*` のように関連オブジェクトを展開するフィールドか判定する。"""

    return EXPANSION_SUFFIX in name


def get_base_field_name(name: str) -> str:
    """`genres.*` → `genres`。"""

    return name.removesuffix(EXPANSION_SUFFIX)


def render_clauses(
    *,
    fields: Iterable[str] = (),
    sort: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
    search: str | None = None,
    where: str | None = None,
) -> str:
    """APIcalypse の各句を固定順 (fields, sort, limit, offset, search, where) で連結する。"""

    parts: list[str] = []
    field_list = ",".join(fields)
    if field_list:
        parts.append(f"fields {field_list}")
    if sort:
        parts.append(f"sort {sort}")
    if limit is not None:
        parts.append(f"limit {clamp_limit(limit)}")
    if offset is not None:
        parts.append(f"offset {clamp_offset(offset)}")
    if search:
        parts.append(f'search "{search}"')
    if where:
        parts.append(f"where {where}")
    return f"{'; '.join(parts)};"


__all__ = [
    "DEFAULT_FIELD_POLICY",
    "DefaultFieldPolicy",
    "EXPANSION_SUFFIX",
    "MAX_LIMIT_PER_REQUEST",
    "MAX_OFFSET",
    "clamp_limit",
    "clamp_offset",
    "get_base_field_name",
    "is_expanded_field",
    "merge_fields",
    "render_clauses",
]
