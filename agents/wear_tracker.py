"""Commit step: stamp the pieces of a worn outfit so they rest in the laundry basket."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable

from fitpick_app.logging_config import get_logger, log_event, operation_context
from models.clothing_item import utc_now
from models.outfit import WearResult
from tools.observability import instrument_tool
from tools.wardrobe_store import WardrobeStore, WardrobeStoreError


LOGGER = get_logger(__name__)


class WearTracker:
    """Updates last-worn timestamps one item at a time.

    Each update stands alone: a failure is recorded against its id and the
    remaining ids are still attempted.
    """

    def __init__(self, store: WardrobeStore, clock: Callable[[], datetime] = utc_now) -> None:
        self.store = store
        self.clock = clock

    @instrument_tool("mark_outfit_as_worn")
    def mark_worn(self, item_ids: Iterable[int]) -> WearResult:
        with operation_context("agent:wear_tracker.mark_worn") as correlation_id:
            result = WearResult()
            worn_at = self.clock()
            for raw_id in item_ids:
                item_id = int(raw_id)
                if item_id <= 0:
                    # Suggested purchases are never stored.
                    result.skipped.append(item_id)
                    continue
                try:
                    updated = self.store.update_last_worn(item_id, worn_at)
                except WardrobeStoreError as exc:
                    LOGGER.warning("Could not mark item %s as worn: %s", item_id, exc)
                    result.failed[item_id] = str(exc)
                    continue
                if updated:
                    result.updated.append(item_id)
                else:
                    result.failed[item_id] = "not_found"

            log_event(
                LOGGER,
                level=logging.INFO if result.ok else logging.WARNING,
                event="outfit_marked_worn",
                correlation_id=correlation_id,
                updated=result.updated,
                skipped=result.skipped,
                failed=sorted(result.failed),
            )
            return result


__all__ = ["WearTracker"]
