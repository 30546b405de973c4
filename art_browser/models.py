"""Data models for the collection browser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Sentinel image reference for artworks without a usable image
PLACEHOLDER_IMAGE = "/api/placeholder/300/400"

ARTIST_UNKNOWN = "Artist Unknown"
DATE_UNKNOWN = "Date Unknown"


@dataclass(frozen=True)
class Artwork:
    """Hydrated artwork record, built by a museum adapter from raw API data."""

    id: str
    source: str  # Museum short name (e.g., "MET", "AIC")
    title: str
    image_url: str = PLACEHOLDER_IMAGE
    artist: str | None = None
    date: str | None = None

    @property
    def artist_label(self) -> str:
        return self.artist or ARTIST_UNKNOWN

    @property
    def date_label(self) -> str:
        return self.date or DATE_UNKNOWN

    @property
    def has_image(self) -> bool:
        return bool(self.image_url) and self.image_url != PLACEHOLDER_IMAGE


# =============================================================================
# Fetch states
# =============================================================================

@dataclass(frozen=True)
class Idle:
    """Nothing requested yet, or the query was just changed."""


@dataclass(frozen=True)
class Loading:
    """A request is in flight; `token` identifies it."""

    token: int


@dataclass(frozen=True)
class Ready:
    """A page was fetched successfully.

    `total_pages` may be 0 for an empty collection, in which case
    `items` is empty too. That is still a successful result.
    """

    items: tuple[Artwork, ...] = field(default_factory=tuple)
    page: int = 1
    total_pages: int = 0


@dataclass(frozen=True)
class Failed:
    """A request failed. `message` is meant for display."""

    message: str


FetchState = Union[Idle, Loading, Ready, Failed]
