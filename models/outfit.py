"""Outfit result and lock-set schemas."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from models.clothing_item import OutfitPiece


# Reserved: echoed on results, not read by any selection rule.
DEFAULT_EVENT_TYPE = "Casual"


class WeatherCategory(str, Enum):
    RAIN = "Rain"
    COLD = "Cold"
    HOT = "Hot"
    NORMAL = "Normal"


# Slot name -> pinned piece, scoped to one generation call.
LockSet = Dict[str, OutfitPiece]


@dataclass
class OutfitSelection:
    """One recommended outfit plus the weather it was chosen for."""

    bottom: OutfitPiece
    top: OutfitPiece
    shoes: OutfitPiece
    outer: Optional[OutfitPiece]
    weather: WeatherCategory
    temperature: float
    event_type: Optional[str] = None

    def pieces(self) -> List[OutfitPiece]:
        return [piece for piece in (self.top, self.bottom, self.shoes, self.outer) if piece is not None]

    def item_ids(self) -> List[int]:
        return [piece.item_id for piece in self.pieces()]

    def suggestions(self) -> List[OutfitPiece]:
        return [piece for piece in self.pieces() if piece.is_ghost]


@dataclass
class WearResult:
    """Per-item outcome of committing to an outfit."""

    updated: List[int] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
