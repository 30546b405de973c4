"""Art Institute of Chicago adapter."""

from __future__ import annotations

from typing import Any

from . import register
from .base import PagedAdapter
from ..models import Artwork


@register
class AICAdapter(PagedAdapter):
    """Adapter for the Art Institute of Chicago API listing endpoint."""

    name = "Art Institute of Chicago"
    short_name = "AIC"
    base_url = "https://api.artic.edu/api/v1/artworks"

    DEFAULT_IIIF_URL = "https://www.artic.edu/iiif/2"
    IMAGE_SUFFIX = "/full/843,/0/default.jpg"

    # Only request the fields the cards need
    FIELDS = [
        "id",
        "title",
        "artist_title",
        "image_id",
        "date_display",
    ]

    def list_page(self, page: int, page_size: int) -> tuple[list[Artwork], int]:
        """Fetch one page from the listing endpoint."""
        params: dict[str, str | int] = {
            "page": page,
            "limit": page_size,
            "fields": ",".join(self.FIELDS),
        }

        self._log_info(f"Fetching page {page} (limit={page_size})")
        data = self._get_json(self.base_url, params=params)

        iiif_url = (data.get("config") or {}).get("iiif_url") or self.DEFAULT_IIIF_URL
        total = (data.get("pagination") or {}).get("total") or 0
        raw_artworks = data.get("data") or []

        self._log_info(f"Received {len(raw_artworks)} artworks (total={total})")

        artworks = [self.to_artwork(item, iiif_url) for item in raw_artworks]
        return artworks, int(total)

    def image_url(self, image_id: str | None, iiif_url: str | None = None) -> str:
        """Build the IIIF image URL for an image id, or the placeholder."""
        if not image_id:
            return self.image_or_placeholder(None)
        return f"{iiif_url or self.DEFAULT_IIIF_URL}/{image_id}{self.IMAGE_SUFFIX}"

    def to_artwork(self, item: dict[str, Any], iiif_url: str | None = None) -> Artwork:
        """Map a raw AIC listing record to an Artwork."""
        return Artwork(
            id=str(item.get("id", "")),
            source=self.short_name,
            title=item.get("title") or "Untitled",
            image_url=self.image_url(item.get("image_id"), iiif_url),
            artist=item.get("artist_title") or None,
            date=item.get("date_display") or None,
        )
