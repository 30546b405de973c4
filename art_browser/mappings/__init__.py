"""Browse query mappings per museum."""

from .departments import (
    ALL_ARTWORKS_QUERY,
    MET_DEPARTMENTS,
    get_departments,
    has_departments,
)

__all__ = [
    "ALL_ARTWORKS_QUERY",
    "MET_DEPARTMENTS",
    "get_departments",
    "has_departments",
]
