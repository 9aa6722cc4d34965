"""APIcalypse クエリ構築パッケージ。"""

from . import companies, games, genres, platforms
from .builder import (
    IGDBQueryBuilder,
    QueryOptions,
    SortDirection,
    build_request_body,
    ids_condition,
    query_by_id,
    query_by_ids,
    query_search,
)
from .fields import (
    DEFAULT_FIELD_POLICY,
    MAX_LIMIT_PER_REQUEST,
    MAX_OFFSET,
    DefaultFieldPolicy,
    get_base_field_name,
    is_expanded_field,
    merge_fields,
)

__all__ = [
    "DEFAULT_FIELD_POLICY",
    "DefaultFieldPolicy",
    "IGDBQueryBuilder",
    "MAX_LIMIT_PER_REQUEST",
    "MAX_OFFSET",
    "QueryOptions",
    "SortDirection",
    "build_request_body",
    "companies",
    "games",
    "genres",
    "get_base_field_name",
    "ids_condition",
    "is_expanded_field",
    "merge_fields",
    "platforms",
    "query_by_id",
    "query_by_ids",
    "query_search",
]
