from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from roster_browser.config import create_config, load_data_settings
from roster_browser.domain.dataset import RESOURCE_PATHS, Dataset
from roster_browser.domain.errors import ConfigError
from roster_browser.domain.result import Err, Ok

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all ROSTERDB__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("ROSTERDB__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/rosterdb.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["data.base_url"] == ""
    assert cfg["data.root"] == "./public"
    assert cfg["http.attempts"] == 1


def test_default_settings() -> None:
    result = load_data_settings(create_config(yaml_path="/nonexistent/rosterdb.yaml"))

    assert isinstance(result, Ok)
    settings = result.value
    assert not settings.remote
    assert settings.paths == dict(RESOURCE_PATHS)
    assert settings.attempts == 1
    assert settings.timeout == 30.0
    assert settings.connect_timeout == 10.0


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "rosterdb.yaml"
    yaml_file.write_text(
        "data:\n"
        "  base_url: https://cdn.example.test\n"
        "  paths:\n"
        "    pitchers: /csv/pitchers.csv\n"
        "http:\n"
        "  attempts: 3\n"
    )

    result = load_data_settings(create_config(yaml_path=str(yaml_file)))

    assert isinstance(result, Ok)
    settings = result.value
    assert settings.remote
    assert settings.base_url == "https://cdn.example.test"
    assert settings.paths[Dataset.PITCHERS] == "/csv/pitchers.csv"
    assert settings.paths[Dataset.BATTERS] == RESOURCE_PATHS[Dataset.BATTERS]
    assert settings.attempts == 3


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "rosterdb.yaml"
    yaml_file.write_text("http:\n  attempts: 3\n")
    monkeypatch.setenv("ROSTERDB__HTTP__ATTEMPTS", "5")
    monkeypatch.setenv("ROSTERDB__DATA__ROOT", "/srv/static")

    result = load_data_settings(create_config(yaml_path=str(yaml_file)))

    assert isinstance(result, Ok)
    assert result.value.attempts == 5
    assert result.value.root == "/srv/static"


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROSTERDB__DATA__BASE_URL", "https://env.example.test")

    cfg = create_config(yaml_path="/nonexistent.yaml", base_url="https://cli.example.test", data_dir="/tmp/db")

    assert cfg["data.base_url"] == "https://cli.example.test"
    assert cfg["data.root"] == "/tmp/db"


def test_unknown_dataset_path_is_config_error(tmp_path: Path) -> None:
    yaml_file = tmp_path / "rosterdb.yaml"
    yaml_file.write_text("data:\n  paths:\n    fielders: /csv/fielders.csv\n")

    result = load_data_settings(create_config(yaml_path=str(yaml_file)))

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigError)
    assert result.error.unrecognized_keys == ("fielders",)


def test_zero_attempts_is_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROSTERDB__HTTP__ATTEMPTS", "0")

    result = load_data_settings(create_config(yaml_path="/nonexistent.yaml"))

    assert isinstance(result, Err)
    assert "attempts" in result.error.message


def test_non_numeric_timeout_is_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROSTERDB__HTTP__TIMEOUT", "soon")

    result = load_data_settings(create_config(yaml_path="/nonexistent.yaml"))

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigError)
