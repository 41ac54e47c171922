"""Map raw weather readings to the coarse categories the generator reasons about."""

from __future__ import annotations

from models.outfit import WeatherCategory

# WMO weather interpretation codes: 51-67 drizzle/rain, 71-77 snow,
# 80-86 showers, 95-99 thunderstorm. All of them count as wet.
PRECIPITATION_CODES = range(51, 100)
COLD_BELOW_C = 10.0
HOT_ABOVE_C = 25.0

DEFAULT_TEMPERATURE_C = 20.0
DEFAULT_CATEGORY = WeatherCategory.NORMAL


def classify(code: int, temperature: float) -> WeatherCategory:
    """Return Rain, Cold, Hot or Normal for a weather code and temperature."""

    if int(code) in PRECIPITATION_CODES:
        return WeatherCategory.RAIN
    if temperature < COLD_BELOW_C:
        return WeatherCategory.COLD
    if temperature > HOT_ABOVE_C:
        return WeatherCategory.HOT
    return WeatherCategory.NORMAL


__all__ = [
    "classify",
    "PRECIPITATION_CODES",
    "DEFAULT_TEMPERATURE_C",
    "DEFAULT_CATEGORY",
]
