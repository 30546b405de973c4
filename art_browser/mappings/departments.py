"""Department lists offered as browse queries.

The Met search endpoint has no department filter that combines with free
text, so a department name is used as the search term itself. Sources
without departments browse their whole collection under ALL_ARTWORKS_QUERY.
"""

from __future__ import annotations

ALL_ARTWORKS_QUERY = "All artworks"

# Public curatorial departments of the Metropolitan Museum of Art
MET_DEPARTMENTS = [
    "American Wing",
    "Ancient Near Eastern Art",
    "Arms and Armor",
    "Arts of Africa, Oceania, and the Americas",
    "Asian Art",
    "Costume Institute",
    "Egyptian Art",
    "European Paintings",
    "European Sculpture and Decorative Arts",
    "Greek and Roman Art",
    "Islamic Art",
    "Modern and Contemporary Art",
    "Musical Instruments",
]

# Keyed by adapter short_name
DEPARTMENTS_BY_SOURCE: dict[str, list[str]] = {
    "MET": MET_DEPARTMENTS,
}


def get_departments(source: str) -> list[str]:
    """Return the departments a source can be browsed by (empty if none)."""
    return list(DEPARTMENTS_BY_SOURCE.get(source.upper(), []))


def has_departments(source: str) -> bool:
    return source.upper() in DEPARTMENTS_BY_SOURCE
