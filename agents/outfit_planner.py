"""Outfit planner: gathers weather and candidate pools, then runs the generator."""

from __future__ import annotations

import contextvars
import logging
import random
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from fitpick_app.config import FitPickConfig
from fitpick_app.logging_config import get_logger, log_event, operation_context
from logic.outfit_builder import build_outfit
from logic.validation import LockValidationError, LockedPiece, validate_lock_set
from logic.weather_classifier import DEFAULT_CATEGORY, DEFAULT_TEMPERATURE_C, classify
from models.clothing_item import ClothingItem, GhostItem, OutfitPiece, utc_now
from models.outfit import DEFAULT_EVENT_TYPE, LockSet, OutfitSelection, WeatherCategory
from models.taxonomy import CATEGORIES, category_for_slot, validate_slot
from tools.observability import instrument_tool
from tools.wardrobe_store import WardrobeStore
from tools.weather_provider import WeatherProvider


LOGGER = get_logger(__name__)


class OutfitPlanner:
    """Builds one outfit per call from a fresh snapshot of the wardrobe.

    Weather failures are absorbed (20C, Normal). Store failures abort the call
    because the candidate pools are mandatory.
    """

    def __init__(
        self,
        config: FitPickConfig,
        store: WardrobeStore,
        weather_provider: WeatherProvider,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config
        self.store = store
        self.weather_provider = weather_provider
        self.rng = rng or random.Random()
        self.clock = clock

    def _resolve_weather(self, latitude: float, longitude: float) -> tuple[float, WeatherCategory, bool]:
        try:
            reading = self.weather_provider.get_current(latitude, longitude)
        except Exception as exc:
            LOGGER.warning("Weather provider %s failed: %s", type(self.weather_provider).__name__, exc)
            reading = None
        if reading is None:
            LOGGER.warning("No weather reading, assuming %.0fC and %s", DEFAULT_TEMPERATURE_C, DEFAULT_CATEGORY.value)
            return DEFAULT_TEMPERATURE_C, DEFAULT_CATEGORY, True
        return reading.temperature, classify(reading.weather_code, reading.temperature), False

    def _fetch_pools(self, now: datetime) -> Dict[str, List[ClothingItem]]:
        """Fetch the four category pools concurrently; any failure propagates."""

        with ThreadPoolExecutor(max_workers=len(CATEGORIES), thread_name_prefix="pool-fetch") as executor:
            futures = {
                category: executor.submit(
                    contextvars.copy_context().run, self.store.fetch_candidates, category, now
                )
                for category in CATEGORIES
            }
            return {category: future.result() for category, future in futures.items()}

    def current_weather(self, latitude: Optional[float] = None, longitude: Optional[float] = None) -> Dict[str, Any]:
        """Return the reading used for outfit decisions at the given coordinate."""

        latitude = self.config.default_latitude if latitude is None else latitude
        longitude = self.config.default_longitude if longitude is None else longitude
        temperature, category, fallback = self._resolve_weather(latitude, longitude)
        return {"temperature": temperature, "weather": category.value, "fallback": fallback}

    def resolve_locked_pieces(self, locked_items: Mapping[str, LockedPiece | Mapping[str, Any]] | None) -> LockSet:
        """Turn wire-level lock references into pieces.

        Real references are loaded from the store; ghost payloads are rebuilt
        as suggestions for the slot's category.
        """

        pieces: Dict[str, OutfitPiece] = {}
        for raw_slot, raw_piece in (locked_items or {}).items():
            try:
                slot = validate_slot(raw_slot)
            except ValueError as exc:
                raise LockValidationError(str(exc)) from exc
            if raw_piece is None:
                continue
            locked = raw_piece if isinstance(raw_piece, LockedPiece) else LockedPiece.model_validate(raw_piece)
            if locked.kind == "real":
                if locked.id is None or locked.id <= 0:
                    raise LockValidationError(f"Locked '{slot}' needs a catalogued item id")
                item = self.store.get_item(locked.id)
                if item is None:
                    raise LockValidationError(f"Locked item {locked.id} does not exist")
                pieces[slot] = item
            else:
                if not locked.color_code or not locked.sub_type:
                    raise LockValidationError(f"Locked suggestion for '{slot}' needs a color_code and sub_type")
                ghost_id = locked.id if locked.id is not None and locked.id < 0 else -self.rng.randint(1, 9999)
                try:
                    pieces[slot] = GhostItem(
                        item_id=ghost_id,
                        category=locked.category or category_for_slot(slot),
                        sub_type=locked.sub_type,
                        color_code=locked.color_code,
                        label=locked.label or "",
                    )
                except ValueError as exc:
                    raise LockValidationError(str(exc)) from exc
        return validate_lock_set(pieces)

    @instrument_tool("generate_outfit")
    def generate_outfit(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        event_type: Optional[str] = DEFAULT_EVENT_TYPE,
        locked_items: Mapping[str, Optional[OutfitPiece]] | None = None,
    ) -> OutfitSelection:
        """Recommend today's outfit.

        ``event_type`` is accepted and echoed on the result; no selection rule
        reads it yet.
        """

        with operation_context("agent:planner.generate_outfit") as correlation_id:
            locks = validate_lock_set(locked_items)
            latitude = self.config.default_latitude if latitude is None else latitude
            longitude = self.config.default_longitude if longitude is None else longitude

            temperature, weather, fallback = self._resolve_weather(latitude, longitude)
            pools = self._fetch_pools(self.clock())

            result = build_outfit(
                temperature=temperature,
                weather=weather,
                pools=pools,
                locked_items=locks,
                rng=self.rng,
                event_type=event_type,
            )
            log_event(
                LOGGER,
                level=logging.INFO,
                event="outfit_generated",
                correlation_id=correlation_id,
                weather=weather.value,
                temperature=temperature,
                weather_fallback=fallback,
                event_type=event_type,
                diagnostics=result.diagnostics,
            )
            return result.selection


__all__ = ["OutfitPlanner"]
