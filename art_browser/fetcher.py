"""Paginated fetching of artworks from a museum adapter."""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from .adapters.base import IdListAdapter, MuseumAdapter, NetworkError, PagedAdapter
from .models import Artwork, Failed, FetchState, Ready

DEFAULT_PAGE_SIZE = 12


def count_pages(total: int, page_size: int) -> int:
    """Number of pages needed for `total` items; 0 for an empty collection."""
    return math.ceil(total / page_size) if total > 0 else 0


def page_slice(page: int, page_size: int, length: int) -> tuple[int, int]:
    """
    Half-open (start, stop) window of a one-based page over a list.

    Both bounds are clamped to [0, length], so a page past the end gives
    an empty window rather than an error.
    """
    start = min((page - 1) * page_size, length)
    stop = min(page * page_size, length)
    return start, stop


class PagedCollectionFetcher:
    """
    Produces pages of hydrated artworks from one museum adapter.

    For adapters that only return id lists (IdListAdapter), the id list of
    the current query is cached and every page is hydrated with one call per
    id, issued in parallel. A page is returned only if every call succeeds.

    For natively paginated adapters (PagedAdapter), each page is a single
    listing call.

    fetch_page() reports failures as a Failed state instead of raising.
    """

    def __init__(
        self,
        adapter: MuseumAdapter,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_workers: int | None = None,
    ) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        if not isinstance(adapter, (IdListAdapter, PagedAdapter)):
            raise TypeError(
                f"{type(adapter).__name__} is neither an IdListAdapter nor a PagedAdapter"
            )

        self.adapter = adapter
        self.page_size = page_size
        self.max_workers = max_workers or page_size

        # Single-entry cache: id list of the most recent query
        self._cached_query: str | None = None
        self._cached_ids: tuple[int, ...] = ()

        self._log_callback: Callable[[str, str], None] | None = None

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback for the fetcher and its adapter."""
        self._log_callback = callback
        self.adapter.set_logger(callback)

    def _log(self, level: str, message: str) -> None:
        if self._log_callback:
            self._log_callback(level, f"[{self.adapter.short_name}] {message}")

    @property
    def cached_query(self) -> str | None:
        return self._cached_query

    def invalidate(self) -> None:
        """Drop the cached id list."""
        self._cached_query = None
        self._cached_ids = ()

    def fetch_page(self, query: str, page_number: int) -> FetchState:
        """
        Fetch one page of artworks for `query`.

        Args:
            query: Search query (ignored by natively paginated adapters)
            page_number: One-based page number

        Returns:
            Ready with the page's artworks, or Failed with a display message

        Raises:
            ValueError: if page_number is less than 1
        """
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")

        try:
            if isinstance(self.adapter, IdListAdapter):
                items, total_pages = self._fetch_from_id_list(query, page_number)
            else:
                items, total_pages = self._fetch_native_page(page_number)
        except NetworkError as e:
            self._log("ERROR", f"Page {page_number} failed: {e.message}")
            return Failed(e.message)
        except Exception as e:
            # Malformed payloads surface here (e.g. a null object body)
            self._log("ERROR", f"Unexpected error on page {page_number}: {type(e).__name__}: {e}")
            return Failed(f"Unexpected error from {self.adapter.name}.")

        self._log("INFO", f"Page {page_number} of {total_pages}: {len(items)} artworks")
        return Ready(items=tuple(items), page=page_number, total_pages=total_pages)

    def _resolve_ids(self, query: str) -> tuple[int, ...]:
        if query == self._cached_query:
            return self._cached_ids

        ids = tuple(self.adapter.search(query))
        self._cached_query = query
        self._cached_ids = ids
        return ids

    def _fetch_from_id_list(self, query: str, page_number: int) -> tuple[list[Artwork], int]:
        ids = self._resolve_ids(query)
        total_pages = count_pages(len(ids), self.page_size)

        start, stop = page_slice(page_number, self.page_size, len(ids))
        page_ids = ids[start:stop]
        if not page_ids:
            return [], total_pages

        return self._hydrate(page_ids), total_pages

    def _hydrate(self, object_ids: tuple[int, ...]) -> list[Artwork]:
        """Fetch every object in parallel; the first failure in page order wins."""
        workers = min(self.max_workers, len(object_ids))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.adapter.get_by_id, oid) for oid in object_ids]
            # Leaving the block waits for all calls, including after a failure
            errors = [f.exception() for f in futures]

        for error in errors:
            if error is not None:
                raise error
        return [f.result() for f in futures]

    def _fetch_native_page(self, page_number: int) -> tuple[list[Artwork], int]:
        artworks, total = self.adapter.list_page(page_number, self.page_size)
        return artworks, count_pages(total, self.page_size)
