"""IGDB API v4 の非同期クライアント。"""

from .auth import (
    IGDBAccessToken,
    IGDBTokenManager,
    TokenRefreshError,
    TokenState,
    TwitchOAuthClient,
)
from .client import IGDBClient, build_igdb_client
from .images import (
    ImageSize,
    build_image_url,
    convert_timestamp,
    format_release_date,
    get_artwork_image_urls,
    get_cover_image_url,
    get_screenshot_image_urls,
)
from .query import (
    DEFAULT_FIELD_POLICY,
    DefaultFieldPolicy,
    IGDBQueryBuilder,
    QueryOptions,
    get_base_field_name,
    is_expanded_field,
    query_by_id,
    query_by_ids,
    query_search,
)
from .request import IGDBDecodeError, IGDBRequestError, IGDBRequestHandler
from .routes import CompaniesRoute, GamesRoute, GenresRoute, IGDBRouteBase, PlatformsRoute
from .shared.exceptions import BaseAppError, ConfigurationError, IGDBClientError

__all__ = [
    "BaseAppError",
    "CompaniesRoute",
    "ConfigurationError",
    "DEFAULT_FIELD_POLICY",
    "DefaultFieldPolicy",
    "GamesRoute",
    "GenresRoute",
    "IGDBAccessToken",
    "IGDBClient",
    "IGDBClientError",
    "IGDBDecodeError",
    "IGDBQueryBuilder",
    "IGDBRequestError",
    "IGDBRequestHandler",
    "IGDBRouteBase",
    "IGDBTokenManager",
    "ImageSize",
    "PlatformsRoute",
    "QueryOptions",
    "TokenRefreshError",
    "TokenState",
    "TwitchOAuthClient",
    "build_igdb_client",
    "build_image_url",
    "convert_timestamp",
    "format_release_date",
    "get_artwork_image_urls",
    "get_base_field_name",
    "get_cover_image_url",
    "get_screenshot_image_urls",
    "is_expanded_field",
    "query_by_id",
    "query_by_ids",
    "query_search",
]
