"""Hand-authored color compatibility table used by the outfit generator."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet

logger = logging.getLogger(__name__)

# Keys and values are color families. The relation is directional: navy lists
# brown, but brown is looked up under its own key.
COMPATIBLE_COLORS: Dict[str, FrozenSet[str]] = {
    "navy": frozenset({"brown", "white", "beige", "grey"}),
    "black": frozenset({"white", "grey", "red", "blue"}),
    "white": frozenset({"black", "navy", "blue", "brown", "green"}),
    "brown": frozenset({"navy", "beige", "white", "green"}),
    "blue": frozenset({"white", "black", "grey", "beige"}),
    "red": frozenset({"black", "white", "navy", "grey"}),
    "green": frozenset({"brown", "white", "black"}),
    "yellow": frozenset({"black", "grey", "navy"}),
    "beige": frozenset({"navy", "brown", "black", "green"}),
    "grey": frozenset({"black", "white", "navy", "blue", "red"}),
}

FALLBACK_MATCHES: FrozenSet[str] = frozenset({"white", "black"})


def matches_of(color: str) -> FrozenSet[str]:
    """Return the color families declared compatible with ``color``.

    Unknown colors, including raw hex codes, fall back to white and black.
    """

    return COMPATIBLE_COLORS.get(str(color or "").lower(), FALLBACK_MATCHES)


def is_match(color: str, other: str) -> bool:
    """Return True when ``other`` is listed as compatible with ``color``.

    Not symmetric: ``is_match(a, b)`` looks ``b`` up in the row for ``a``.
    """

    result = str(other or "").lower() in matches_of(color)
    logger.debug("color match (%s, %s) -> %s", color, other, result)
    return result


__all__ = ["COMPATIBLE_COLORS", "FALLBACK_MATCHES", "matches_of", "is_match"]
