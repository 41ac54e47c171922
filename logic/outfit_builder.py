"""Anchor-first outfit assembly with transparent diagnostics.

The builder is pure: it receives the weather and one candidate pool per
category, and returns an :class:`OutfitSelection`. All randomness flows
through the ``rng`` argument so callers can replay a selection exactly.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from logic.validation import validate_lock_set
from models.clothing_item import ClothingItem, OutfitPiece, suggest_purchase
from models.color_theory import is_match
from models.outfit import OutfitSelection, WeatherCategory
from models.taxonomy import (
    BOTTOM_SLOT,
    GHOST_BOTTOM_COLORS,
    GHOST_BOTTOM_SUB_TYPE,
    GHOST_OUTER_COLORS,
    GHOST_OUTER_SUB_TYPES,
    GHOST_RAIN_OUTER_SUB_TYPE,
    GHOST_SHOE_COLORS,
    GHOST_SHOE_SUB_TYPE,
    GHOST_TOP_COLORS,
    LIGHT_TOP_SUB_TYPES,
    LOWER,
    OUTER,
    OUTER_SLOT,
    SHOES,
    SHOES_SLOT,
    TOP_SLOT,
    UPPER,
    WARM_TOP_SUB_TYPES,
)

logger = logging.getLogger(__name__)

WARM_TOP_BELOW_C = 15.0
OUTER_CONSIDERED_BELOW_C = 15.0
OUTER_SUGGESTED_BELOW_C = 10.0


@dataclass(frozen=True)
class OutfitBuildResult:
    selection: OutfitSelection
    diagnostics: Dict[str, object]


def _shuffled(pool: Sequence[ClothingItem] | None, rng: random.Random) -> List[ClothingItem]:
    items = list(pool or [])
    rng.shuffle(items)
    return items


def _pick_color(options: Sequence[str], anchor_color: str, fallback: str, rng: random.Random) -> str:
    """Pick uniformly among the options that go with the anchor color."""

    valid = [color for color in options if is_match(anchor_color, color)]
    return rng.choice(valid) if valid else fallback


def _suggest_bottom(rng: random.Random) -> OutfitPiece:
    # No compatibility filter here, even when a locked top is the anchor.
    return suggest_purchase(LOWER, rng.choice(GHOST_BOTTOM_COLORS), GHOST_BOTTOM_SUB_TYPE, rng)


def _resolve_bottom(
    bottoms: List[ClothingItem], locked_top: Optional[OutfitPiece], rng: random.Random
) -> tuple[OutfitPiece, str]:
    if locked_top is not None:
        matching = [item for item in bottoms if is_match(item.color_code, locked_top.color_code)]
        if matching:
            return matching[0], "wardrobe"
        logger.info("No bottom goes with locked %s top, suggesting one", locked_top.color_code)
        return _suggest_bottom(rng), "suggested"
    if bottoms:
        return bottoms[0], "wardrobe"
    return _suggest_bottom(rng), "suggested"


def _resolve_top(
    tops: List[ClothingItem], bottom_color: str, temperature: float, rng: random.Random
) -> tuple[OutfitPiece, str]:
    matching = [item for item in tops if is_match(bottom_color, item.color_code)]
    if matching:
        if temperature < WARM_TOP_BELOW_C:
            warmer = [item for item in matching if item.sub_type in WARM_TOP_SUB_TYPES]
            if warmer:
                return warmer[0], "wardrobe"
        return matching[0], "wardrobe"

    color = _pick_color(GHOST_TOP_COLORS, bottom_color, "White", rng)
    sub_types = WARM_TOP_SUB_TYPES if temperature < WARM_TOP_BELOW_C else LIGHT_TOP_SUB_TYPES
    return suggest_purchase(UPPER, color, rng.choice(sub_types), rng), "suggested"


def _resolve_shoes(shoes: List[ClothingItem], bottom_color: str, rng: random.Random) -> tuple[OutfitPiece, str]:
    matching = [item for item in shoes if is_match(bottom_color, item.color_code)]
    if matching:
        return matching[0], "wardrobe"
    color = _pick_color(GHOST_SHOE_COLORS, bottom_color, "White", rng)
    return suggest_purchase(SHOES, color, GHOST_SHOE_SUB_TYPE, rng), "suggested"


def _resolve_outer(
    outers: List[ClothingItem],
    bottom_color: str,
    temperature: float,
    weather: WeatherCategory,
    rng: random.Random,
) -> tuple[Optional[OutfitPiece], str]:
    raining = weather == WeatherCategory.RAIN
    if not (temperature < OUTER_CONSIDERED_BELOW_C or raining):
        return None, "not_needed"

    matching = [item for item in outers if is_match(bottom_color, item.color_code)]
    if matching:
        return matching[0], "wardrobe"

    # Between the two thresholds a missing layer is tolerable.
    if not (temperature < OUTER_SUGGESTED_BELOW_C or raining):
        return None, "skipped"

    color = _pick_color(GHOST_OUTER_COLORS, bottom_color, "Black", rng)
    sub_type = GHOST_RAIN_OUTER_SUB_TYPE if raining else rng.choice(GHOST_OUTER_SUB_TYPES)
    return suggest_purchase(OUTER, color, sub_type, rng), "suggested"


def build_outfit(
    temperature: float,
    weather: WeatherCategory,
    pools: Mapping[str, Sequence[ClothingItem]],
    locked_items: Mapping[str, Optional[OutfitPiece]] | None = None,
    rng: random.Random | None = None,
    event_type: str | None = None,
) -> OutfitBuildResult:
    """Fill bottom, top, shoes and outer from the candidate pools.

    ``pools`` maps a category (Upper/Lower/Outer/Shoes) to the items currently
    out of the laundry basket. Locked slots are kept as given. ``event_type``
    is carried through to the result untouched.
    """

    rng = rng or random.Random()
    locks = validate_lock_set(locked_items)

    tops = _shuffled(pools.get(UPPER), rng)
    bottoms = _shuffled(pools.get(LOWER), rng)
    shoes = _shuffled(pools.get(SHOES), rng)
    outers = _shuffled(pools.get(OUTER), rng)

    diagnostics: Dict[str, object] = {
        "pool_sizes": {UPPER: len(tops), LOWER: len(bottoms), SHOES: len(shoes), OUTER: len(outers)},
        "locked": sorted(locks),
        "anchor": BOTTOM_SLOT,
        "sources": {},
    }
    sources: Dict[str, str] = diagnostics["sources"]  # type: ignore[assignment]

    top = locks.get(TOP_SLOT)
    bottom = locks.get(BOTTOM_SLOT)
    shoe = locks.get(SHOES_SLOT)
    outer = locks.get(OUTER_SLOT)

    if bottom is None:
        if top is not None:
            diagnostics["anchor"] = TOP_SLOT
        bottom, sources[BOTTOM_SLOT] = _resolve_bottom(bottoms, top, rng)
    else:
        sources[BOTTOM_SLOT] = "locked"
    bottom_color = bottom.color_code

    if top is None:
        top, sources[TOP_SLOT] = _resolve_top(tops, bottom_color, temperature, rng)
    else:
        sources[TOP_SLOT] = "locked"

    if shoe is None:
        shoe, sources[SHOES_SLOT] = _resolve_shoes(shoes, bottom_color, rng)
    else:
        sources[SHOES_SLOT] = "locked"

    if outer is None:
        outer, sources[OUTER_SLOT] = _resolve_outer(outers, bottom_color, temperature, weather, rng)
    else:
        sources[OUTER_SLOT] = "locked"

    logger.info(
        "Built outfit anchored on %s for %s at %.1fC: %s",
        diagnostics["anchor"],
        weather.value,
        temperature,
        sources,
    )
    selection = OutfitSelection(
        bottom=bottom,
        top=top,
        shoes=shoe,
        outer=outer,
        weather=weather,
        temperature=temperature,
        event_type=event_type,
    )
    return OutfitBuildResult(selection=selection, diagnostics=diagnostics)


__all__ = [
    "build_outfit",
    "OutfitBuildResult",
    "WARM_TOP_BELOW_C",
    "OUTER_CONSIDERED_BELOW_C",
    "OUTER_SUGGESTED_BELOW_C",
]
