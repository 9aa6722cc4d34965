"""APIcalypse クエリを組み立てるビルダー。"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Concatenate, Literal, ParamSpec

from .fields import clamp_limit, clamp_offset, merge_fields, render_clauses

SortDirection = Literal["asc", "desc"]
SortSpec = str | tuple[str, SortDirection]

P = ParamSpec("P")


@dataclass(slots=True, frozen=True)
class QueryOptions:
    """ルートメソッドへ渡すクエリ設定。

    `fields` は `genres.*` のような展開パスを含められる。
    `include_default_fields` が True の場合、エンドポイントのデフォルト
    フィールドが後ろに連結される。
    """

    fields: tuple[str, ...] = ()
    include_default_fields: bool = True
    where: str | None = None
    search: str | None = None
    sort: str | None = None
    limit: int | None = None
    offset: int | None = None

    def merge(self, **changes) -> QueryOptions:
        return replace(self, **changes)

    def and_where(self, condition: str) -> QueryOptions:
        """既存の where 条件に `&` で条件を追加した設定を返す。"""

        where = f"{self.where} & {condition}" if self.where else condition
        return replace(self, where=where)


def build_request_body(options: QueryOptions, defaults: Iterable[str] = ()) -> str:
    """ルートからのリクエストボディを生成する。

    呼び出し側のフィールドとデフォルトフィールドを連結し重複を除いてから、
    ビルダーと同じ句順で描画する。
    """

    fields = merge_fields(
        options.fields,
        defaults,
        include_defaults=options.include_default_fields,
    )
    return render_clauses(
        fields=fields,
        sort=options.sort,
        limit=options.limit,
        offset=options.offset,
        search=options.search,
        where=options.where,
    )


class IGDBQueryBuilder:
    """APIcalypse クエリを組み立てるビルダー。

    各メソッドはビルダー自身を返すため、メソッドチェーンで記述できる。
    エンティティ固有の絞り込みは `apply()` に `igdb_wrapper.query.games`
    などの関数を渡して合成する。

    >>> IGDBQueryBuilder().select("id", "name").where("rating > 80").sort_by(
    ...     "rating", "desc"
    ... ).limit(5).build()
    'fields id,name; sort rating desc; limit 5; where rating > 80;'
    """

    def __init__(self) -> None:
        self._clear()

    def _clear(self) -> None:
        self._fields: list[str] = []
        self._where: list[str] = []
        self._sort: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None
        self._search: str | None = None
        self._include_defaults = True

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    @property
    def where_clauses(self) -> tuple[str, ...]:
        return tuple(self._where)

    @property
    def sort_clauses(self) -> tuple[str, ...]:
        return tuple(self._sort)

    @property
    def limit_value(self) -> int | None:
        return self._limit

    @property
    def offset_value(self) -> int | None:
        return self._offset

    @property
    def search_term(self) -> str | None:
        return self._search

    def select(self, *fields: str) -> IGDBQueryBuilder:
        # 重複除去はしない (デフォルトとのマージ時のみ行う)
        self._fields.extend(fields)
        return self

    def exclude_defaults(self) -> IGDBQueryBuilder:
        self._include_defaults = False
        return self

    def include_defaults(self) -> IGDBQueryBuilder:
        self._include_defaults = True
        return self

    def where(self, condition: str) -> IGDBQueryBuilder:
        self._where.append(condition)
        return self

    def where_and(self, *conditions: str) -> IGDBQueryBuilder:
        self._where.extend(conditions)
        return self

    def where_or(self, *conditions: str) -> IGDBQueryBuilder:
        """条件を `|` で連結し、括弧で包んだ 1 条件として追加する。"""

        if conditions:
            self._where.append(f"({'|'.join(conditions)})")
        return self

    def sort_by(self, field: str, direction: SortDirection = "asc") -> IGDBQueryBuilder:
        self._sort.append(f"{field} {direction}")
        return self

    def sort_by_multiple(self, *sorts: SortSpec) -> IGDBQueryBuilder:
        for spec in sorts:
            if isinstance(spec, str):
                self.sort_by(spec)
            else:
                self.sort_by(*spec)
        return self

    def limit(self, value: int) -> IGDBQueryBuilder:
        self._limit = clamp_limit(value)
        return self

    def offset(self, value: int) -> IGDBQueryBuilder:
        self._offset = clamp_offset(value)
        return self

    def search(self, term: str) -> IGDBQueryBuilder:
        """検索語を設定する。エスケープは呼び出し側の責務。"""

        self._search = term
        return self

    def apply(
        self,
        func: Callable[Concatenate[IGDBQueryBuilder, P], IGDBQueryBuilder],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> IGDBQueryBuilder:
        return func(self, *args, **kwargs)

    def build(self) -> str:
        return render_clauses(
            fields=self._fields,
            sort=",".join(self._sort) or None,
            limit=self._limit,
            offset=self._offset,
            search=self._search,
            where=" & ".join(self._where) or None,
        )

    def get_options(self) -> QueryOptions:
        """ルートメソッドへ渡せる `QueryOptions` に変換する。"""

        return QueryOptions(
            fields=tuple(self._fields),
            include_default_fields=self._include_defaults,
            where=" & ".join(self._where) or None,
            search=self._search,
            sort=",".join(self._sort) or None,
            limit=self._limit,
            offset=self._offset,
        )

    def reset(self) -> IGDBQueryBuilder:
        self._clear()
        return self

    def __str__(self) -> str:
        return self.build()


def ids_condition(ids: Sequence[int]) -> str:
    if len(ids) == 1:
        return f"id = {ids[0]}"
    return f"id = ({','.join(str(item) for item in ids)})"


def _with_fields(fields: Sequence[str] | None) -> IGDBQueryBuilder:
    builder = IGDBQueryBuilder()
    if fields:
        builder.select(*fields)
    return builder


def query_by_id(entity_id: int, fields: Sequence[str] | None = None) -> str:
    """ID 指定で 1 件取得するクエリ。"""

    return _with_fields(fields).where(f"id = {entity_id}").limit(1).build()


def query_by_ids(ids: Sequence[int], fields: Sequence[str] | None = None) -> str:
    """複数 ID を指定して取得するクエリ。"""

    return _with_fields(fields).where(ids_condition(ids)).build()


def query_search(term: str, fields: Sequence[str] | None = None) -> str:
    return _with_fields(fields).search(term).build()


__all__ = [
    "IGDBQueryBuilder",
    "QueryOptions",
    "SortDirection",
    "SortSpec",
    "build_request_body",
    "ids_condition",
    "query_by_id",
    "query_by_ids",
    "query_search",
]
