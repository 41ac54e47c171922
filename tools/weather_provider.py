"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests
from pydantic import BaseModel, ValidationError

from tools.observability import instrument_tool


LOGGER = logging.getLogger(__name__)


class _CurrentWeather(BaseModel):
    temperature: float
    weathercode: int
    is_day: int = 1


class _ForecastResponse(BaseModel):
    current_weather: _CurrentWeather


@dataclass
class WeatherReading:
    """Current conditions at a coordinate."""

    temperature: float
    weather_code: int
    is_day: bool = True


class WeatherProvider(ABC):
    """Abstract weather provider interface.

    Implementations return ``None`` when no reading is available; callers
    decide on the fallback.
    """

    @abstractmethod
    def get_current(self, latitude: float, longitude: float) -> WeatherReading | None:
        """Return the current weather reading or ``None``."""


class OpenMeteoProvider(WeatherProvider):
    """Open-Meteo provider with schema validation and graceful failures."""

    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1",
        timeout_seconds: float = 5.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @instrument_tool("get_current_weather")
    def get_current(self, latitude: float, longitude: float) -> WeatherReading | None:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
        }
        url = f"{self.base_url}/forecast"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
            parsed = _ForecastResponse.model_validate(payload)
        except requests.RequestException as exc:
            LOGGER.warning("Weather API unreachable: %s", exc)
            return None
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return None

        current = parsed.current_weather
        return WeatherReading(
            temperature=current.temperature,
            weather_code=current.weathercode,
            is_day=bool(current.is_day),
        )


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests and local runs."""

    def __init__(self, reading: WeatherReading | None = None, available: bool = True) -> None:
        self.reading = reading or WeatherReading(temperature=20.0, weather_code=0)
        self.available = available
        self.calls: list[tuple[float, float]] = []

    def get_current(self, latitude: float, longitude: float) -> WeatherReading | None:
        self.calls.append((latitude, longitude))
        LOGGER.info("Returning mock weather reading")
        return self.reading if self.available else None


__all__ = ["WeatherReading", "WeatherProvider", "OpenMeteoProvider", "MockWeatherProvider"]
