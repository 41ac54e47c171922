"""Catalogue operations over the wardrobe store."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from logic.validation import piece_payload
from models.taxonomy import validate_category
from tools.observability import instrument_tool
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore


def _default_store() -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore()


class WardrobeTools:
    """Thin wrapper exposing catalogue operations as plain dict payloads."""

    def __init__(self, store: Optional[WardrobeStore] = None) -> None:
        self.store = store or _default_store()

    @instrument_tool("add_wardrobe_item")
    def add_item(
        self,
        image_path: str,
        category: str,
        color_code: str | None = None,
        sub_type: str | None = None,
    ) -> Dict[str, Any]:
        category = validate_category(category)
        if color_code is not None and not str(color_code).strip():
            raise ValueError("color_code cannot be blank")
        stored = self.store.create_item(
            image_path=image_path,
            category=category,
            color_code=color_code,
            sub_type=sub_type or None,
        )
        return piece_payload(stored).model_dump(mode="json")

    @instrument_tool("get_wardrobe_item")
    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        item = self.store.get_item(item_id)
        return piece_payload(item).model_dump(mode="json") if item else None

    @instrument_tool("list_wardrobe_items")
    def list_items(self) -> List[Dict[str, Any]]:
        return [piece_payload(item).model_dump(mode="json") for item in self.store.list_items()]

    @instrument_tool("count_wardrobe_items")
    def count_items(self) -> int:
        return self.store.count_items()


__all__ = ["WardrobeTools"]
