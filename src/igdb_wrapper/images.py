"""画像 URL の組み立てと日付変換のヘルパー。"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any

IMAGE_BASE_URL = "https://images.igdb.com/igdb/image/upload"


class ImageSize(str, Enum):
    """IGDB の画像 CDN がサポートするサイズ。"""

    ORIGINAL = "original"
    COVER_SMALL = "cover_small"
    COVER_MED = "cover_med"
    COVER_BIG = "cover_big"
    SCREENSHOT_MED = "screenshot_med"
    SCREENSHOT_BIG = "screenshot_big"
    SCREENSHOT_HUGE = "screenshot_huge"
    LOGO_MED = "logo_med"
    THUMB = "thumb"
    MICRO = "micro"
    HD_720P = "720p"
    HD_1080P = "1080p"

    @property
    def token(self) -> str:
        """URL に埋め込むサイズトークン (`t_cover_big` など)。"""

        return f"t_{self.value}"


def _resolve_size(size: ImageSize | str) -> ImageSize:
    try:
        return ImageSize(size)
    except ValueError:
        return ImageSize.ORIGINAL


def build_image_url(image_id: str, size: ImageSize | str = ImageSize.ORIGINAL) -> str:
    """`image_id` とサイズから CDN 上の画像 URL を返す。

    未知のサイズは `original` として扱う。
    """

    if not image_id:
        raise ValueError("Image ID is required to build IGDB image URL")
    return f"{IMAGE_BASE_URL}/{_resolve_size(size).token}/{image_id}.jpg"


def get_cover_image_url(
    cover: Mapping[str, Any] | None, size: ImageSize | str = ImageSize.COVER_BIG
) -> str | None:
    if not cover or not cover.get("image_id"):
        return None
    return build_image_url(cover["image_id"], size)


def _image_urls(images: Iterable[Any] | None, size: ImageSize | str) -> list[str]:
    if not images:
        return []
    # 展開していない場合は数値 ID の配列なので読み飛ばす
    return [
        build_image_url(image["image_id"], size)
        for image in images
        if isinstance(image, Mapping) and image.get("image_id")
    ]


def get_screenshot_image_urls(
    screenshots: Iterable[Any] | None, size: ImageSize | str = ImageSize.SCREENSHOT_BIG
) -> list[str]:
    return _image_urls(screenshots, size)


def get_artwork_image_urls(
    artworks: Iterable[Any] | None, size: ImageSize | str = ImageSize.HD_1080P
) -> list[str]:
    return _image_urls(artworks, size)


def convert_timestamp(timestamp: int | float | None) -> datetime | None:
    """IGDB の Unix 秒を UTC の datetime に変換する。"""

    if not timestamp or timestamp <= 0:
        return None
    return datetime.fromtimestamp(timestamp, tz=UTC)


def format_release_date(release_date: Mapping[str, Any] | None) -> str | None:
    """表示用のリリース日。`human` があれば優先し、無ければ `date` を ISO 形式にする。"""

    if not release_date:
        return None
    human = release_date.get("human")
    if human:
        return str(human)
    converted = convert_timestamp(release_date.get("date"))
    return converted.date().isoformat() if converted else None


__all__ = [
    "IMAGE_BASE_URL",
    "ImageSize",
    "build_image_url",
    "convert_timestamp",
    "format_release_date",
    "get_artwork_image_urls",
    "get_cover_image_url",
    "get_screenshot_image_urls",
]
