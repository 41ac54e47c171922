"""Color compatibility table and weather classifier coverage."""

import pytest

from logic.weather_classifier import classify
from models.color_theory import COMPATIBLE_COLORS, is_match, matches_of
from models.outfit import WeatherCategory


def test_table_rows_match_catalogue() -> None:
    assert matches_of("navy") == {"brown", "white", "beige", "grey"}
    assert matches_of("grey") == {"black", "white", "navy", "blue", "red"}
    assert len(COMPATIBLE_COLORS) == 10


def test_unknown_colors_fall_back_to_white_and_black() -> None:
    assert matches_of("#3a5f0b") == {"white", "black"}
    assert matches_of("Camel") == {"white", "black"}
    assert is_match("#3a5f0b", "White") is True
    assert is_match("#3a5f0b", "navy") is False


def test_is_match_is_case_insensitive() -> None:
    assert is_match("Navy", "BEIGE") is True
    assert is_match("BLUE", "grey") is True


def test_compatibility_is_directional() -> None:
    """Yellow lists black, but black does not list yellow."""

    assert is_match("yellow", "black") is True
    assert is_match("black", "yellow") is False
    assert is_match("beige", "black") is True
    assert is_match("black", "beige") is False


def test_is_match_is_pure_across_repeated_calls() -> None:
    pairs = [(a, b) for a in COMPATIBLE_COLORS for b in COMPATIBLE_COLORS]
    forward = {pair: is_match(*pair) for pair in pairs}
    backward = {pair: is_match(*pair) for pair in reversed(pairs)}
    assert forward == backward


@pytest.mark.parametrize(
    "code, temperature, expected",
    [
        (51, 30.0, WeatherCategory.RAIN),
        (99, -5.0, WeatherCategory.RAIN),
        (63, 18.0, WeatherCategory.RAIN),
        (50, 5.0, WeatherCategory.COLD),
        (100, 18.0, WeatherCategory.NORMAL),
        (0, 9.9, WeatherCategory.COLD),
        (0, 10.0, WeatherCategory.NORMAL),
        (3, 25.0, WeatherCategory.NORMAL),
        (3, 25.1, WeatherCategory.HOT),
    ],
)
def test_classify_thresholds(code: int, temperature: float, expected: WeatherCategory) -> None:
    assert classify(code, temperature) is expected


def test_classify_is_deterministic() -> None:
    results = {classify(61, 4.0) for _ in range(10)}
    assert results == {WeatherCategory.RAIN}
