"""IGDB API のレスポンス形状。

レスポンスはバリデーションせず JSON の dict をそのまま返すため、ここでは
`TypedDict` で構造のみを宣言する。関連エンティティのフィールドは
`.*` で展開した場合はオブジェクト、そうでなければ数値 ID になる。
"""

from __future__ import annotations

from typing import Required, TypedDict


class TokenResponse(TypedDict):
    access_token: str
    expires_in: int
    token_type: str


class ImageRef(TypedDict, total=False):
    """カバー・スクリーンショット・アートワーク共通の画像情報。"""

    id: Required[int]
    image_id: Required[str]
    url: str
    width: int
    height: int
    checksum: str
    alpha_channel: bool
    animated: bool
    game: int


Cover = ImageRef
Screenshot = ImageRef
Artwork = ImageRef


class PlatformLogo(TypedDict, total=False):
    id: Required[int]
    image_id: Required[str]
    url: str
    width: int
    height: int


class NamedEntity(TypedDict, total=False):
    """名前と slug だけを持つ単純なエンティティ。"""

    id: Required[int]
    checksum: str
    created_at: int
    updated_at: int
    name: str
    slug: str
    url: str


Genre = NamedEntity
Theme = NamedEntity
GameMode = NamedEntity


class Website(TypedDict, total=False):
    id: Required[int]
    checksum: str
    category: int
    url: str
    trusted: bool
    game: int


class GameVideo(TypedDict, total=False):
    id: Required[int]
    checksum: str
    name: str
    video_id: str
    game: int


class GameEngine(NamedEntity, total=False):
    companies: list[int]
    logo: int
    platforms: list[int]


class ReleaseDate(TypedDict, total=False):
    id: Required[int]
    checksum: str
    created_at: int
    updated_at: int
    category: int
    date: int
    human: str
    region: int
    platform: int
    game: int
    m: int
    y: int
    status: int


class Company(NamedEntity, total=False):
    description: str
    country: int
    logo: int | ImageRef
    parent: int
    websites: list[int] | list[Website]
    published: list[int]
    developed: list[int]
    change_date_category: int
    start_date: int
    start_date_category: int


class InvolvedCompany(TypedDict, total=False):
    id: Required[int]
    checksum: str
    created_at: int
    updated_at: int
    company: int | Company
    developer: bool
    publisher: bool
    porting: bool
    supporting: bool
    game: int


class Platform(NamedEntity, total=False):
    abbreviation: str
    alternative_name: str
    category: int
    generation: int
    platform_family: int
    summary: str
    platform_logo: int | PlatformLogo
    websites: list[int] | list[Website]
    versions: list[int]


class Game(TypedDict, total=False):
    id: Required[int]
    name: str
    slug: str
    checksum: str
    created_at: int
    updated_at: int
    url: str

    category: int
    status: int
    summary: str
    storyline: str

    rating: float
    rating_count: int
    total_rating: float
    total_rating_count: int
    aggregated_rating: float
    aggregated_rating_count: int
    hypes: int
    follows: int

    first_release_date: int

    cover: int | Cover
    screenshots: list[int] | list[Screenshot]
    artworks: list[int] | list[Artwork]
    videos: list[int] | list[GameVideo]

    genres: list[int] | list[Genre]
    themes: list[int] | list[Theme]
    platforms: list[int] | list[Platform]
    game_modes: list[int] | list[GameMode]
    player_perspectives: list[int]
    keywords: list[int]

    release_dates: list[int] | list[ReleaseDate]
    involved_companies: list[int] | list[InvolvedCompany]

    similar_games: list[int] | list[Game]
    bundles: list[int]
    dlcs: list[int]
    expansions: list[int]
    standalone_expansions: list[int]
    expanded_games: list[int]
    ports: list[int]
    remakes: list[int]
    remasters: list[int]

    collection: int
    collections: list[int]
    franchise: int
    franchises: list[int]

    game_engines: list[int] | list[GameEngine]
    websites: list[int] | list[Website]
    external_games: list[int]
    multiplayer_modes: list[int]
    language_supports: list[int]
    game_localizations: list[int]

    tags: list[int]
    age_ratings: list[int]
    alternative_names: list[int]
    parent_game: int


SimilarGame = Game


__all__ = [
    "Artwork",
    "Company",
    "Cover",
    "Game",
    "GameEngine",
    "GameMode",
    "GameVideo",
    "Genre",
    "ImageRef",
    "InvolvedCompany",
    "NamedEntity",
    "Platform",
    "PlatformLogo",
    "ReleaseDate",
    "Screenshot",
    "SimilarGame",
    "Theme",
    "TokenResponse",
    "Website",
]
