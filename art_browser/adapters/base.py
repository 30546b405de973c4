"""Abstract base classes for museum adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable
import requests

from ..models import Artwork, PLACEHOLDER_IMAGE


class NetworkError(Exception):
    """Raised when a museum API call does not succeed.

    Covers non-2xx responses as well as transport failures (DNS, timeouts,
    refused connections) and unreadable response bodies. The message is
    meant to be shown to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MuseumAdapter(ABC):
    """
    Abstract base class for museum API adapters.

    Subclasses implement museum-specific API logic while this base class
    provides HTTP access, error translation and logging infrastructure.
    """

    # Subclasses must define these
    name: str = "Unknown Museum"  # Full display name
    short_name: str = "UNK"  # Short identifier (e.g., "MET", "AIC")
    base_url: str = ""

    # Timeout (can be overridden)
    fetch_timeout: int = 30

    # Skip SSL verification (debugging only)
    ssl_bypass: bool = False

    # Logging callback - set by app to integrate with UI logging
    _log_callback: Callable[[str, str], None] | None = None

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        """Log a message if callback is set."""
        if self._log_callback:
            self._log_callback(level, f"[{self.short_name}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)

    def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a URL and decode its JSON body.

        Every requests failure is translated into a NetworkError with a
        user-friendly message; callers never see requests exceptions.
        """
        try:
            response = requests.get(
                url,
                params=params,
                timeout=self.fetch_timeout,
                verify=not self.ssl_bypass,
            )
            response.raise_for_status()
            return response.json()

        except requests.Timeout as e:
            self._log_error(f"Timeout after {self.fetch_timeout}s")
            raise NetworkError(
                f"{self.name} took too long to respond. Try again."
            ) from e

        except requests.ConnectionError as e:
            self._log_error("Connection failed")
            raise NetworkError(
                f"Could not connect to {self.name}. Check your internet connection."
            ) from e

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            self._log_error(f"HTTP error: {status}")
            raise NetworkError(
                f"{self.name} returned an error (status {status}). Try again later."
            ) from e

        except requests.RequestException as e:
            # Includes invalid JSON bodies (requests.JSONDecodeError)
            self._log_error(f"Request error: {e}")
            raise NetworkError(f"Error communicating with {self.name}. Try again.") from e

    @staticmethod
    def image_or_placeholder(url: str | None) -> str:
        return url or PLACEHOLDER_IMAGE


class IdListAdapter(MuseumAdapter):
    """
    Museum whose search returns a full list of ids.

    Pages are cut client-side from the id list and each id is hydrated
    with a separate detail call.
    """

    @abstractmethod
    def search(self, query: str) -> list[int]:
        """Return the ordered ids matching `query`. Raises NetworkError."""

    @abstractmethod
    def get_by_id(self, object_id: int) -> Artwork:
        """Fetch and map a single artwork. Raises NetworkError."""


class PagedAdapter(MuseumAdapter):
    """Museum whose listing endpoint paginates natively."""

    @abstractmethod
    def list_page(self, page: int, page_size: int) -> tuple[list[Artwork], int]:
        """
        Fetch one page of artworks.

        Args:
            page: One-based page number
            page_size: Number of artworks per page

        Returns:
            Tuple of (artworks on the page, total number of artworks)

        Raises:
            NetworkError: if the call does not succeed
        """
