"""Configuration helpers for the FitPick wardrobe app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Dict, Optional

DEFAULT_DB_PATH = "data/fitpick.db"
DEFAULT_WEATHER_API_BASE_URL = "https://api.open-meteo.com/v1"
DEFAULT_WEATHER_TIMEOUT_SECONDS = 5.0
# Istanbul
DEFAULT_LATITUDE = 41.0082
DEFAULT_LONGITUDE = 28.9784


@dataclass
class FitPickConfig:
    """Configuration values for the FitPick app.

    The composition root builds one of these and hands it to the collaborators
    that need it (store, weather provider, server). Nothing else reads the
    environment directly.
    """

    wardrobe_db_path: str = DEFAULT_DB_PATH
    weather_api_base_url: str = DEFAULT_WEATHER_API_BASE_URL
    weather_timeout_seconds: float = DEFAULT_WEATHER_TIMEOUT_SECONDS
    default_latitude: float = DEFAULT_LATITUDE
    default_longitude: float = DEFAULT_LONGITUDE
    log_level: Optional[str] = None
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.weather_timeout_seconds <= 0:
            raise ValueError("weather_timeout_seconds must be positive")
        if not -90 <= self.default_latitude <= 90:
            raise ValueError(f"default_latitude out of range: {self.default_latitude}")
        if not -180 <= self.default_longitude <= 180:
            raise ValueError(f"default_longitude out of range: {self.default_longitude}")

    @classmethod
    def from_env(cls) -> "FitPickConfig":
        """Build a config from environment variables and an optional YAML file.

        The file is ``APP_CONFIG_PATH`` when set, else
        ``config/environments/<APP_ENV>.yaml`` (directory overridable with
        ``FITPICK_CONFIG_DIR``). Environment variables take precedence.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("FITPICK_CONFIG_DIR", "config/environments"))

        if config_path:
            path: Optional[Path] = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None
        file_values = cls._load_yaml_config(path) if path and path.exists() else {}

        def get_value(key: str) -> Optional[str]:
            return os.getenv(key.upper(), file_values.get(key))

        return cls(
            wardrobe_db_path=get_value("wardrobe_db_path") or DEFAULT_DB_PATH,
            weather_api_base_url=get_value("weather_api_base_url") or DEFAULT_WEATHER_API_BASE_URL,
            weather_timeout_seconds=cls._as_float(
                "weather_timeout_seconds", get_value("weather_timeout_seconds"), DEFAULT_WEATHER_TIMEOUT_SECONDS
            ),
            default_latitude=cls._as_float("default_latitude", get_value("default_latitude"), DEFAULT_LATITUDE),
            default_longitude=cls._as_float("default_longitude", get_value("default_longitude"), DEFAULT_LONGITUDE),
            log_level=get_value("log_level") or None,
            environment=env_name,
        )

    @staticmethod
    def _as_float(key: str, raw: Optional[str], default: float) -> float:
        if raw is None or str(raw).strip() == "":
            return default
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"Config value '{key}' must be numeric, got {raw!r}") from exc

    @staticmethod
    def _load_yaml_config(path: Path) -> Dict[str, str]:
        """Read flat ``key: value`` lines; nesting and lists are not supported."""

        values: Dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if value[:1] in {'"', "'"} and value.endswith(value[0]) and len(value) > 1:
                value = value[1:-1]
            elif " #" in value:
                value = value.split(" #", 1)[0].rstrip()
            values[key.strip()] = value
        return values
