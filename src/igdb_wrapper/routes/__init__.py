"""エンドポイントごとのルート。"""

from .base import IGDBRouteBase
from .companies import CompaniesRoute
from .games import GamesRoute
from .genres import GenresRoute
from .platforms import PlatformsRoute

__all__ = [
    "CompaniesRoute",
    "GamesRoute",
    "GenresRoute",
    "IGDBRouteBase",
    "PlatformsRoute",
]
