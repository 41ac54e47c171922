"""
Wiring tests: configuration loading, logging helpers and the composition root.
"""

from importlib import import_module
import io
import json
import logging
from pathlib import Path
from typing import Tuple

import pytest

from fitpick_app.app import FitPickApp
from fitpick_app.config import FitPickConfig
from fitpick_app.logging_config import (
    JsonFormatter,
    configure_logging,
    correlation_context,
    operation_context,
    redact_for_log,
)
from models.clothing_item import ClothingItem
from tools.wardrobe_store import SQLiteWardrobeStore
from tools.weather_provider import MockWeatherProvider, OpenMeteoProvider, WeatherReading


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in (
        "APP_ENV",
        "APP_CONFIG_PATH",
        "FITPICK_CONFIG_DIR",
        "WARDROBE_DB_PATH",
        "WEATHER_API_BASE_URL",
        "WEATHER_TIMEOUT_SECONDS",
        "DEFAULT_LATITUDE",
        "DEFAULT_LONGITUDE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_config_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = FitPickConfig.from_env()
    assert config.wardrobe_db_path == "data/fitpick.db"
    assert config.weather_api_base_url == "https://api.open-meteo.com/v1"
    assert config.default_latitude == pytest.approx(41.0082)
    assert config.environment is None


def test_config_merges_yaml_and_env(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_file = tmp_path / "staging.yaml"
    config_file.write_text(
        "# staging\n"
        "wardrobe_db_path: \"/var/fitpick/wardrobe.db\"\n"
        "weather_timeout_seconds: 2.5\n"
        "default_latitude: 48.85\n"
    )
    clean_env.setenv("APP_ENV", "staging")
    clean_env.setenv("APP_CONFIG_PATH", str(config_file))
    clean_env.setenv("DEFAULT_LATITUDE", "52.52")

    config = FitPickConfig.from_env()

    assert config.wardrobe_db_path == "/var/fitpick/wardrobe.db"
    assert config.weather_timeout_seconds == 2.5
    assert config.default_latitude == 52.52
    assert config.environment == "staging"


def test_config_rejects_non_numeric_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("WEATHER_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ValueError):
        FitPickConfig.from_env()


def test_config_file_inline_comments_are_ignored(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config_dir = tmp_path / "environments"
    config_dir.mkdir()
    (config_dir / "dev.yaml").write_text("log_level: DEBUG  # noisy\nweather_api_base_url: http://localhost:9000/v1\n")
    clean_env.setenv("APP_ENV", "dev")
    clean_env.setenv("FITPICK_CONFIG_DIR", str(config_dir))

    config = FitPickConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.weather_api_base_url == "http://localhost:9000/v1"


@pytest.mark.parametrize(
    "overrides",
    [{"default_latitude": 91.0}, {"default_longitude": -181.0}, {"weather_timeout_seconds": 0}],
)
def test_config_rejects_out_of_range_values(overrides: dict) -> None:
    with pytest.raises(ValueError):
        FitPickConfig(**overrides)


def test_redaction_coarsens_coordinates_and_hides_paths() -> None:
    scrubbed = redact_for_log(
        {
            "latitude": 41.00824,
            "lon": "near home",
            "image_path": "/photos/1.png",
            "note": "mail me@example.com",
            "tags": ("http://x",),
        }
    )
    assert scrubbed == {
        "latitude": 41.0,
        "lon": "[redacted]",
        "image_path": "[redacted]",
        "note": "mail [redacted-email]",
        "tags": ["[redacted-url]"],
    }


def test_json_formatter_includes_correlation_id() -> None:
    record = logging.LogRecord("fitpick", logging.INFO, __file__, 1, "outfit_generated", None, None)
    record.weather = "Rain"
    with correlation_context("abc123"):
        payload = json.loads(JsonFormatter().format(record))
    assert payload["correlation_id"] == "abc123"
    assert payload["weather"] == "Rain"
    assert payload["level"] == "INFO"


def test_operation_context_keeps_outer_correlation_id(caplog: pytest.LogCaptureFixture) -> None:
    with correlation_context("outer-id"):
        with pytest.raises(RuntimeError):
            with operation_context("agent:test") as scoped_id:
                assert scoped_id == "outer-id"
                raise RuntimeError("boom")

    failed = [record for record in caplog.records if getattr(record, "event", None) == "operation_failed"]
    assert failed and failed[0].correlation_id == "outer-id"
    assert failed[0].error == "RuntimeError"


def test_app_wires_collaborators(tmp_path: Path) -> None:
    app = FitPickApp(config=FitPickConfig(wardrobe_db_path=str(tmp_path / "app.db")))

    assert isinstance(app.wardrobe_store, SQLiteWardrobeStore)
    assert isinstance(app.weather_provider, OpenMeteoProvider)
    assert app.planner.store is app.wardrobe_store
    assert app.wear_tracker.store is app.wardrobe_store


def test_home_summary(tmp_path: Path) -> None:
    app = FitPickApp(
        config=FitPickConfig(wardrobe_db_path=str(tmp_path / "app.db")),
        weather_provider=MockWeatherProvider(WeatherReading(temperature=12.0, weather_code=0)),
    )
    app.wardrobe_tools.add_item(image_path="/photos/a.png", category="Upper", color_code="Red")

    summary = app.home_summary()

    assert summary["total_items"] == 1
    assert summary["weather"]["weather"] == "Normal"


@pytest.mark.parametrize(
    "module_path, public_members",
    [
        ("agents.outfit_planner", ("OutfitPlanner",)),
        ("agents.wear_tracker", ("WearTracker",)),
        ("logic.outfit_builder", ("build_outfit", "OutfitBuildResult")),
        ("logic.weather_classifier", ("classify",)),
        ("models.color_theory", ("is_match", "matches_of")),
        ("tools.wardrobe_store", ("WardrobeStore", "SQLiteWardrobeStore")),
        ("tools.weather_provider", ("WeatherProvider", "OpenMeteoProvider")),
    ],
)
def test_modules_export_expected_members(module_path: str, public_members: Tuple[str, ...]) -> None:
    """Modules should import cleanly and expose expected members."""

    module = import_module(module_path)
    for member in public_members:
        assert hasattr(module, member), f"{module_path} is missing {member}"


def test_locked_item_photo_path_stays_out_of_logs(tmp_path: Path) -> None:
    app = FitPickApp(
        config=FitPickConfig(wardrobe_db_path=str(tmp_path / "app.db")),
        weather_provider=MockWeatherProvider(WeatherReading(temperature=18.0, weather_code=0)),
    )
    top = app.wardrobe_tools.add_item(
        image_path="/home/alice/private/selfie.png", category="Upper", color_code="Red", sub_type="Shirt"
    )
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    try:
        app.generate_outfit(locked_items={"top": {"kind": "real", "id": top["id"]}})
    finally:
        configure_logging("INFO")

    out = stream.getvalue()
    assert "tool_call_started" in out
    assert "selfie.png" not in out
    started = next(json.loads(line) for line in out.splitlines() if '"tool_call_started"' in line and "locked_items" in line)
    assert started["kwargs"]["locked_items"]["top"]["image_path"] == "[redacted]"
    assert started["kwargs"]["locked_items"]["top"]["kind"] == "real"


def test_redaction_scrubs_garment_dataclasses() -> None:
    item = ClothingItem(item_id=3, category="Shoes", color_code="Brown", image_path="/photos/boots.png")
    scrubbed = redact_for_log({"piece": item})
    assert scrubbed["piece"]["image_path"] == "[redacted]"
    assert scrubbed["piece"]["category"] == "Shoes"
