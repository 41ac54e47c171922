"""FitPick app bootstrap."""

import random
from typing import Any, Dict, Iterable, Mapping, Optional

from fitpick_app.config import FitPickConfig
from fitpick_app.logging_config import configure_logging, get_logger
from agents.outfit_planner import OutfitPlanner
from agents.wear_tracker import WearTracker
from logic.validation import LockedPiece
from models.outfit import DEFAULT_EVENT_TYPE, OutfitSelection, WearResult
from tools.wardrobe_store import SQLiteWardrobeStore, WardrobeStore
from tools.wardrobe_tools import WardrobeTools
from tools.weather_provider import OpenMeteoProvider, WeatherProvider


LOGGER = get_logger(__name__)


class FitPickApp:
    """Wires together the store, the weather provider and the services.

    This is the only place that owns configuration; collaborators receive what
    they need through their constructors.
    """

    def __init__(
        self,
        config: FitPickConfig | None = None,
        store: WardrobeStore | None = None,
        weather_provider: WeatherProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or FitPickConfig.from_env()
        configure_logging(self.config.log_level)

        self.wardrobe_store = store or SQLiteWardrobeStore(self.config.wardrobe_db_path)
        self.weather_provider = weather_provider or OpenMeteoProvider(
            base_url=self.config.weather_api_base_url,
            timeout_seconds=self.config.weather_timeout_seconds,
        )
        self.wardrobe_tools = WardrobeTools(self.wardrobe_store)
        self.planner = OutfitPlanner(
            config=self.config,
            store=self.wardrobe_store,
            weather_provider=self.weather_provider,
            rng=rng,
        )
        self.wear_tracker = WearTracker(self.wardrobe_store)
        LOGGER.info("FitPick app ready (environment=%s)", self.config.environment or "local")

    def generate_outfit(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        event_type: Optional[str] = DEFAULT_EVENT_TYPE,
        locked_items: Mapping[str, LockedPiece | Mapping[str, Any]] | None = None,
    ) -> OutfitSelection:
        """Resolve wire-level locks and generate an outfit."""

        locks = self.planner.resolve_locked_pieces(locked_items)
        return self.planner.generate_outfit(
            latitude=latitude,
            longitude=longitude,
            event_type=event_type,
            locked_items=locks,
        )

    def mark_outfit_as_worn(self, item_ids: Iterable[int]) -> WearResult:
        return self.wear_tracker.mark_worn(item_ids)

    def home_summary(self) -> Dict[str, Any]:
        """Item count plus the current weather at the default location."""

        return {
            "total_items": self.wardrobe_tools.count_items(),
            "weather": self.planner.current_weather(),
        }
