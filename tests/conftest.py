"""Shared fixtures: scripted randomness, fixed clocks and seeded wardrobes."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

import pytest

from models.clothing_item import ClothingItem
from tools.wardrobe_store import SQLiteWardrobeStore

NOW = datetime(2025, 3, 14, 8, 0, tzinfo=timezone.utc)


class ScriptedRandom(random.Random):
    """Keeps pool order and always picks the option at ``pick_index``."""

    def __init__(self, pick_index: int = 0) -> None:
        super().__init__(0)
        self.pick_index = pick_index

    def shuffle(self, x) -> None:  # noqa: D401
        return None

    def choice(self, seq: Sequence):
        return seq[self.pick_index if self.pick_index >= 0 else len(seq) + self.pick_index]

    def randint(self, a: int, b: int) -> int:
        return a


def make_item(item_id: int, category: str, color: str, sub_type: str | None = None, **kwargs) -> ClothingItem:
    return ClothingItem(
        item_id=item_id,
        category=category,
        color_code=color,
        sub_type=sub_type,
        image_path=f"/photos/{item_id}.png",
        created_at=kwargs.pop("created_at", NOW),
        **kwargs,
    )


@pytest.fixture()
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "wardrobe.db")
