"""Metropolitan Museum of Art adapter."""

from __future__ import annotations

from typing import Any

from . import register
from .base import IdListAdapter
from ..models import Artwork


@register
class METAdapter(IdListAdapter):
    """
    Adapter for the Met Collection API.

    The search endpoint only returns the complete list of matching object
    ids, so pages are sliced client-side and every object is fetched
    individually.
    """

    name = "Metropolitan Museum of Art"
    short_name = "MET"
    base_url = "https://collectionapi.metmuseum.org/public/collection/v1"

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    def object_url(self, object_id: int) -> str:
        return f"{self.base_url}/objects/{object_id}"

    def search(self, query: str) -> list[int]:
        """Search objects with images matching `query` (e.g., a department name)."""
        params = {
            "hasImages": "true",
            "q": query,  # the API ignores filters placed after q
        }
        self._log_info(f"Searching for {query!r}")
        data = self._get_json(self.search_url, params=params)

        # objectIDs is null when nothing matches
        object_ids = data.get("objectIDs") or []
        self._log_info(f"Search returned {len(object_ids)} object ids")
        return list(object_ids)

    def get_by_id(self, object_id: int) -> Artwork:
        """Fetch a single object and map it to an Artwork."""
        data = self._get_json(self.object_url(object_id))
        return self.to_artwork(data, fallback_id=object_id)

    def to_artwork(self, item: dict[str, Any], fallback_id: int | None = None) -> Artwork:
        """Map a raw Met object record to an Artwork."""
        object_id = item.get("objectID", fallback_id)
        return Artwork(
            id=str(object_id),
            source=self.short_name,
            title=item.get("title") or "Untitled",
            image_url=self.image_or_placeholder(item.get("primaryImage")),
            artist=item.get("artistDisplayName") or None,
            date=item.get("objectDate") or None,
        )
