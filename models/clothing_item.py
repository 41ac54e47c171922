"""Catalogued garments and suggested-purchase placeholders."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Union

from models.taxonomy import DEFAULT_COLOR_CODE, LAUNDRY_COOLDOWN, validate_category


class ItemKind(str, Enum):
    """Discriminator between owned garments and suggested purchases."""

    REAL = "real"
    GHOST = "ghost"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Coerce an ISO string or datetime into an aware UTC datetime."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ClothingItem:
    """A garment the user owns and has added to the catalogue."""

    item_id: int
    category: str
    color_code: str
    sub_type: Optional[str] = None
    image_path: str = ""
    last_worn: Optional[datetime] = None
    created_at: Optional[datetime] = None
    kind: ItemKind = field(default=ItemKind.REAL, init=False)

    def __post_init__(self) -> None:
        self.item_id = int(self.item_id)
        if self.item_id <= 0:
            raise ValueError(f"Catalogued items need a positive id, got {self.item_id}")
        self.category = validate_category(self.category)
        self.color_code = str(self.color_code or DEFAULT_COLOR_CODE)
        self.last_worn = parse_timestamp(self.last_worn)
        self.created_at = parse_timestamp(self.created_at)

    @property
    def is_ghost(self) -> bool:
        return False

    def in_cooldown(self, now: datetime) -> bool:
        """True while the item is resting in the laundry basket."""

        if self.last_worn is None:
            return False
        return self.last_worn > now - LAUNDRY_COOLDOWN


@dataclass
class GhostItem:
    """A suggested purchase standing in for a garment the user does not own."""

    item_id: int
    category: str
    sub_type: str
    color_code: str
    label: str = ""
    image_path: str = ""
    kind: ItemKind = field(default=ItemKind.GHOST, init=False)

    def __post_init__(self) -> None:
        self.item_id = int(self.item_id)
        if self.item_id >= 0:
            raise ValueError(f"Suggested purchases carry a negative id, got {self.item_id}")
        self.category = validate_category(self.category)
        if not self.label:
            self.label = f"Buy: {self.color_code} {self.sub_type}"

    @property
    def is_ghost(self) -> bool:
        return True


OutfitPiece = Union[ClothingItem, GhostItem]


def suggest_purchase(category: str, color: str, sub_type: str, rng: random.Random) -> GhostItem:
    """Create a placeholder for a garment worth buying."""

    return GhostItem(item_id=-rng.randint(1, 9999), category=category, sub_type=sub_type, color_code=color)


def from_record(record: Mapping[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from a storage row or loose payload."""

    required_fields = ["id", "type"]
    missing = [name for name in required_fields if record.get(name) in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=int(record["id"]),
        category=str(record["type"]),
        color_code=str(record.get("color_code") or DEFAULT_COLOR_CODE),
        sub_type=record.get("sub_type"),
        image_path=str(record.get("image_path") or ""),
        last_worn=record.get("last_worn_date"),
        created_at=record.get("created_at"),
    )


__all__ = [
    "ItemKind",
    "ClothingItem",
    "GhostItem",
    "OutfitPiece",
    "parse_timestamp",
    "utc_now",
    "suggest_purchase",
    "from_record",
]
