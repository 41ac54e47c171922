"""Wardrobe storage abstractions and SQLite implementation."""
from __future__ import annotations

import contextlib
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional

from models.clothing_item import ClothingItem, from_record, utc_now
from models.taxonomy import DEFAULT_COLOR_CODE, validate_category


class WardrobeStoreError(RuntimeError):
    """Raised when the underlying storage cannot serve a request."""


class WardrobeStore:
    """Persistence interface for catalogued garments."""

    def create_item(
        self,
        image_path: str,
        category: str,
        color_code: str | None = None,
        sub_type: str | None = None,
        created_at: datetime | None = None,
    ) -> ClothingItem:
        raise NotImplementedError

    def get_item(self, item_id: int) -> Optional[ClothingItem]:
        raise NotImplementedError

    def list_items(self) -> List[ClothingItem]:
        raise NotImplementedError

    def count_items(self) -> int:
        raise NotImplementedError

    def fetch_by_category(self, category: str) -> List[ClothingItem]:
        raise NotImplementedError

    def update_last_worn(self, item_id: int, worn_at: datetime) -> bool:
        raise NotImplementedError

    def fetch_candidates(self, category: str, now: datetime | None = None) -> List[ClothingItem]:
        """Items of ``category`` that are out of the laundry basket at ``now``."""

        now = now or utc_now()
        return [item for item in self.fetch_by_category(category) if not item.in_cooldown(now)]


def _row_to_item(row: sqlite3.Row) -> ClothingItem:
    try:
        return from_record(dict(row))
    except (KeyError, TypeError, ValueError) as exc:
        raise WardrobeStoreError(f"Corrupt wardrobe row {row['id']}: {exc}") from exc


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for catalogued garments."""

    def __init__(self, database_path: str | Path = "data/fitpick.db") -> None:
        self.database_path = Path(database_path)
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self.database_path)
        except sqlite3.Error as exc:
            raise WardrobeStoreError(f"Cannot open wardrobe database: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise WardrobeStoreError(str(exc)) from exc
        finally:
            conn.close()

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS items (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    image_path TEXT NOT NULL,
                    type TEXT NOT NULL,
                    sub_type TEXT,
                    color_code TEXT,
                    last_worn_date TEXT,
                    created_at TEXT NOT NULL
                );
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_items_type ON items (type);")

    def create_item(
        self,
        image_path: str,
        category: str,
        color_code: str | None = None,
        sub_type: str | None = None,
        created_at: datetime | None = None,
    ) -> ClothingItem:
        if not image_path:
            raise ValueError("image_path is required to catalogue an item")
        category = validate_category(category)
        created_at = created_at or utc_now()
        with self._connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO items (image_path, type, sub_type, color_code, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (image_path, category, sub_type, color_code or DEFAULT_COLOR_CODE, created_at.isoformat()),
            )
            item_id = cursor.lastrowid
        return ClothingItem(
            item_id=item_id,
            category=category,
            color_code=color_code or DEFAULT_COLOR_CODE,
            sub_type=sub_type,
            image_path=image_path,
            created_at=created_at,
        )

    def get_item(self, item_id: int) -> Optional[ClothingItem]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM items WHERE id = ?", (int(item_id),)).fetchone()
            return _row_to_item(row) if row else None

    def list_items(self) -> List[ClothingItem]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM items ORDER BY created_at DESC, id DESC").fetchall()
            return [_row_to_item(row) for row in rows]

    def count_items(self) -> int:
        with self._connect() as conn:
            return int(conn.execute("SELECT COUNT(*) FROM items").fetchone()[0])

    def fetch_by_category(self, category: str) -> List[ClothingItem]:
        category = validate_category(category)
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM items WHERE type = ? ORDER BY id", (category,)).fetchall()
            return [_row_to_item(row) for row in rows]

    def update_last_worn(self, item_id: int, worn_at: datetime) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(
                "UPDATE items SET last_worn_date = ? WHERE id = ?",
                (worn_at.isoformat(), int(item_id)),
            )
            return cursor.rowcount > 0


__all__ = ["WardrobeStore", "SQLiteWardrobeStore", "WardrobeStoreError"]
