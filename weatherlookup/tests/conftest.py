"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from weatherlookup.ingest.payloads import parse_current, parse_series
from weatherlookup.models.weather import CurrentConditions, RawSeries

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def current_payload() -> dict:
    with open(FIXTURE_DIR / "owm_current_surakarta.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_surakarta.json") as f:
        return json.load(f)


@pytest.fixture
def current(current_payload: dict) -> CurrentConditions:
    return parse_current(current_payload)


@pytest.fixture
def series(forecast_payload: dict) -> RawSeries:
    return parse_series(forecast_payload)


@pytest.fixture
def fixed_now() -> datetime:
    # A Wednesday
    return datetime(2026, 2, 11, 12, 30, tzinfo=UTC)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "test-key", "units": "metric"},
        "display": {"locale": "id", "timezone": "UTC"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
