"""Lock-set validation and pydantic schemas for the HTTP payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from models.clothing_item import ClothingItem, GhostItem, ItemKind, OutfitPiece
from models.outfit import DEFAULT_EVENT_TYPE, LockSet, OutfitSelection, WearResult
from models.taxonomy import SLOT_CATEGORIES, validate_slot


class LockValidationError(ValueError):
    """Raised when a caller pins a piece to a slot it cannot fill."""


def validate_lock_set(locked_items: Mapping[str, Optional[OutfitPiece]] | None) -> LockSet:
    """Return a normalised lock set, rejecting unknown slots and category mismatches."""

    validated: LockSet = {}
    for raw_slot, piece in (locked_items or {}).items():
        try:
            slot = validate_slot(raw_slot)
        except ValueError as exc:
            raise LockValidationError(str(exc)) from exc
        if piece is None:
            continue
        if not isinstance(piece, (ClothingItem, GhostItem)):
            raise LockValidationError(f"Locked '{slot}' must be a catalogued item or a suggestion")
        expected = SLOT_CATEGORIES[slot]
        if piece.category != expected:
            raise LockValidationError(
                f"Item {piece.item_id} is {piece.category} and cannot be locked to '{slot}' (needs {expected})"
            )
        validated[slot] = piece
    return validated


class ItemPayload(BaseModel):
    """Wire shape of an outfit piece or catalogued item."""

    id: int
    kind: Literal["real", "ghost"]
    category: str
    sub_type: Optional[str] = None
    color_code: str
    image_path: str = ""
    label: Optional[str] = None
    last_worn: Optional[datetime] = None
    created_at: Optional[datetime] = None


class AddItemRequest(BaseModel):
    """Input contract for adding a garment to the catalogue."""

    image_path: str = Field(min_length=1)
    category: str = Field(min_length=1)
    color_code: Optional[str] = None
    sub_type: Optional[str] = None


class LockedPiece(BaseModel):
    """A pinned slot: either a catalogued item reference or a suggestion to keep."""

    kind: Literal["real", "ghost"] = "real"
    id: Optional[int] = None
    category: Optional[str] = None
    sub_type: Optional[str] = None
    color_code: Optional[str] = None
    label: Optional[str] = None


class OutfitRequest(BaseModel):
    """Envelope for outfit generation."""

    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    event_type: Optional[str] = DEFAULT_EVENT_TYPE
    locked_items: Dict[str, LockedPiece] = Field(default_factory=dict)


class OutfitResponse(BaseModel):
    top: ItemPayload
    bottom: ItemPayload
    shoes: ItemPayload
    outer: Optional[ItemPayload] = None
    weather: str
    temperature: float
    event_type: Optional[str] = None


class WearRequest(BaseModel):
    item_ids: List[int] = Field(default_factory=list)


class WearResponse(BaseModel):
    ok: bool
    updated: List[int]
    skipped: List[int]
    failed: Dict[int, str]


def piece_payload(piece: OutfitPiece) -> ItemPayload:
    if isinstance(piece, GhostItem):
        return ItemPayload(
            id=piece.item_id,
            kind=ItemKind.GHOST.value,
            category=piece.category,
            sub_type=piece.sub_type,
            color_code=piece.color_code,
            image_path=piece.image_path,
            label=piece.label,
        )
    return ItemPayload(
        id=piece.item_id,
        kind=ItemKind.REAL.value,
        category=piece.category,
        sub_type=piece.sub_type,
        color_code=piece.color_code,
        image_path=piece.image_path,
        last_worn=piece.last_worn,
        created_at=piece.created_at,
    )


def outfit_payload(selection: OutfitSelection) -> OutfitResponse:
    return OutfitResponse(
        top=piece_payload(selection.top),
        bottom=piece_payload(selection.bottom),
        shoes=piece_payload(selection.shoes),
        outer=piece_payload(selection.outer) if selection.outer is not None else None,
        weather=selection.weather.value,
        temperature=selection.temperature,
        event_type=selection.event_type,
    )


def wear_payload(result: WearResult) -> WearResponse:
    return WearResponse(ok=result.ok, updated=result.updated, skipped=result.skipped, failed=result.failed)


__all__ = [
    "LockValidationError",
    "validate_lock_set",
    "ItemPayload",
    "AddItemRequest",
    "LockedPiece",
    "OutfitRequest",
    "OutfitResponse",
    "WearRequest",
    "WearResponse",
    "piece_payload",
    "outfit_payload",
    "wear_payload",
]
