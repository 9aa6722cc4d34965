"""共有型・ユーティリティ。"""

from __future__ import annotations

import time
from datetime import UTC, datetime


def utc_now() -> datetime:
    """UTC の現在時刻を返す。"""

    return datetime.now(UTC)


def unix_now() -> int:
    """IGDB の日付フィールドと比較するための現在 Unix 秒。"""

    return int(time.time())


__all__ = [
    "unix_now",
    "utc_now",
]
