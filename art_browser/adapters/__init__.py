"""Museum adapter registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .base import MuseumAdapter

_ADAPTERS: dict[str, type[MuseumAdapter]] = {}


def register(cls: type["MuseumAdapter"]) -> type["MuseumAdapter"]:
    """Class decorator adding an adapter to the registry under its short_name."""
    if cls.short_name in _ADAPTERS:
        raise ValueError(f"Adapter already registered: {cls.short_name}")
    _ADAPTERS[cls.short_name] = cls
    return cls


def get_adapter(
    short_name: str,
    *,
    ssl_bypass: bool = False,
    logger: Callable[[str, str], None] | None = None,
) -> "MuseumAdapter":
    """
    Build a configured adapter instance by short name (e.g., 'MET', 'AIC').

    Raises:
        ValueError: if no adapter is registered under that name
    """
    try:
        adapter_cls = _ADAPTERS[short_name.upper()]
    except KeyError:
        available = ", ".join(_ADAPTERS) or "none"
        raise ValueError(
            f"Unknown adapter: {short_name}. Available: {available}"
        ) from None

    adapter = adapter_cls()
    adapter.ssl_bypass = ssl_bypass
    if logger is not None:
        adapter.set_logger(logger)
    return adapter


def get_adapter_names() -> dict[str, str]:
    """Return dict mapping short_name -> display name, in registration order."""
    return {name: cls.name for name, cls in _ADAPTERS.items()}


# Registration happens on import, so these must follow the registry
from . import met  # noqa: E402, F401
from . import aic  # noqa: E402, F401
