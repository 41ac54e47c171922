"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, GhostItem, ItemKind, OutfitPiece, from_record, suggest_purchase
from models.outfit import LockSet, OutfitSelection, WearResult, WeatherCategory

__all__ = [
    "ClothingItem",
    "GhostItem",
    "ItemKind",
    "OutfitPiece",
    "from_record",
    "suggest_purchase",
    "LockSet",
    "OutfitSelection",
    "WearResult",
    "WeatherCategory",
]
