"""
Pytest configuration and fake museum adapters.

The fakes implement the adapter interfaces without touching the network so
the fetcher can be tested against exact id lists, totals and failures.
"""

import threading
import time

import pytest

from art_browser.adapters.base import IdListAdapter, NetworkError, PagedAdapter
from art_browser.models import Artwork


class FakeIdListAdapter(IdListAdapter):
    name = "Fake Id List Museum"
    short_name = "FAKEIDS"

    def __init__(self, ids_by_query=None, failing_ids=(), fail_search=False, delays=None):
        self.ids_by_query = ids_by_query or {}
        self.failing_ids = set(failing_ids)
        self.fail_search = fail_search
        self.delays = delays or {}
        self.search_calls = []
        self.hydrated_ids = []
        self._lock = threading.Lock()

    def search(self, query):
        self.search_calls.append(query)
        if self.fail_search:
            raise NetworkError("search failed")
        return list(self.ids_by_query.get(query, []))

    def get_by_id(self, object_id):
        time.sleep(self.delays.get(object_id, 0))
        with self._lock:
            self.hydrated_ids.append(object_id)
        if object_id in self.failing_ids:
            raise NetworkError(f"object {object_id} failed")
        return Artwork(id=str(object_id), source=self.short_name, title=f"Artwork {object_id}")


class FakePagedAdapter(PagedAdapter):
    name = "Fake Paged Museum"
    short_name = "FAKEPAGED"

    def __init__(self, total=0, fail=False):
        self.total = total
        self.fail = fail
        self.calls = []

    def list_page(self, page, page_size):
        self.calls.append((page, page_size))
        if self.fail:
            raise NetworkError("listing failed")
        start = (page - 1) * page_size
        stop = min(page * page_size, self.total)
        artworks = [
            Artwork(id=str(i), source=self.short_name, title=f"Artwork {i}")
            for i in range(start, max(start, stop))
        ]
        return artworks, self.total


@pytest.fixture
def asian_art_ids():
    """37 ids, so 12 per page gives 4 pages with a single item on the last."""
    return list(range(1000, 1037))


@pytest.fixture
def id_list_adapter(asian_art_ids):
    return FakeIdListAdapter(ids_by_query={"Asian Art": asian_art_ids})
