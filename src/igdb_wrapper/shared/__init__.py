"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, IGDBSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError, IGDBClientError
from .logging import configure_logging, get_logger
from .types import unix_now, utc_now

__all__ = [
    "AppSettings",
    "IGDBSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "BaseAppError",
    "ConfigurationError",
    "IGDBClientError",
    "unix_now",
    "utc_now",
]
