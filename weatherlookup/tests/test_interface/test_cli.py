"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import pytest
import respx
import yaml

from weatherlookup.cli import main

BASE = "https://test-owm.example.com/data/2.5"


@pytest.fixture
def cli_config(tmp_path: Path) -> Path:
    data = {
        "api": {"api_key": "test-key", "base_url": BASE},
        "display": {"timezone": "UTC"},
    }
    path = tmp_path / "cli.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show_hides_api_key(self, cli_config: Path, capsys):
        result = main(["--config", str(cli_config), "config", "show"])
        assert result == 0
        out = capsys.readouterr().out
        assert "test-owm.example.com" in out
        assert "test-key" not in out

    def test_config_set(self, cli_config: Path, capsys):
        result = main([
            "--config", str(cli_config), "config", "set", "display.locale=id",
        ])
        assert result == 0
        assert "Set display.locale = id" in capsys.readouterr().out

    def test_config_set_bad_format(self, cli_config: Path, capsys):
        result = main(["--config", str(cli_config), "config", "set", "nope"])
        assert result == 1

    def test_config_set_unknown_key(self, cli_config: Path, capsys):
        result = main([
            "--config", str(cli_config), "config", "set", "display.colour=red",
        ])
        assert result == 1
        assert "Error" in capsys.readouterr().out

    def test_config_set_unknown_timezone(self, cli_config: Path, capsys):
        result = main([
            "--config", str(cli_config),
            "config", "set", "display.timezone=Mars/Olympus",
        ])
        assert result == 1
        assert "Unknown timezone" in capsys.readouterr().out

    @respx.mock
    def test_invalid_timezone_in_file_exits_cleanly(self, tmp_path: Path, capsys):
        route = respx.get(f"{BASE}/weather")
        path = tmp_path / "bad_tz.yaml"
        path.write_text("display:\n  timezone: Mars/Olympus\n")
        result = main(["--config", str(path), "city", "Surakarta"])
        assert result == 1
        assert "Unknown timezone" in capsys.readouterr().out
        assert not route.called

    @respx.mock
    def test_blank_city_fails_without_network(self, cli_config: Path, capsys):
        route = respx.get(f"{BASE}/weather")
        result = main(["--config", str(cli_config), "city", "  "])
        assert result == 1
        assert "City name must not be empty" in capsys.readouterr().out
        assert not route.called

    @respx.mock
    def test_city_lookup_json(
        self, cli_config: Path, current_payload: dict, forecast_payload: dict, capsys
    ):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{BASE}/forecast").mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )
        result = main([
            "--config", str(cli_config), "--format", "json", "city", "Surakarta",
        ])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "ready"
        assert data["forecast_source"] == "upstream"
        assert len(data["hourly"]) == 5

    @respx.mock
    def test_multi_word_city(self, cli_config: Path, current_payload: dict, capsys):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{BASE}/forecast").mock(return_value=httpx.Response(500))
        result = main(["--config", str(cli_config), "city", "New", "York"])
        assert result == 0
        assert route.calls[0].request.url.params["q"] == "New York"
        assert "estimated" in capsys.readouterr().out

    @respx.mock
    def test_not_found_localized(self, cli_config: Path, capsys):
        respx.get(f"{BASE}/weather").mock(return_value=httpx.Response(404))
        result = main([
            "--config", str(cli_config), "--locale", "id", "city", "Atlantis",
        ])
        assert result == 1
        assert "Lokasi 'Atlantis' tidak ditemukan" in capsys.readouterr().out

    @respx.mock
    def test_here_uses_default_location(
        self, cli_config: Path, current_payload: dict, capsys
    ):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=current_payload)
        )
        respx.get(f"{BASE}/forecast").mock(return_value=httpx.Response(500))
        result = main(["--config", str(cli_config), "--format", "chat", "here"])
        assert result == 0
        assert route.calls[0].request.url.params["lat"] == "-7.5755"
        assert "**Surakarta**" in capsys.readouterr().out
