"""Tests for configuration adapter."""

import os
from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from transfer_bot.adapters.config import AppConfig
from transfer_bot.adapters.formatters import MONETIZATION_MESSAGE


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(_env_file=None)

    assert config.schedule_file == "schedule.yaml"
    assert config.timezone == "Asia/Yekaterinburg"
    assert config.max_wait_hours == 3.0
    assert config.wait_horizon == timedelta(hours=3)
    assert config.monetization_message == MONETIZATION_MESSAGE
    assert config.log_level == "INFO"
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("SCHEDULE_FILE", "/etc/shuttle/schedule.yaml")
    monkeypatch.setenv("TIMEZONE", "Europe/Moscow")
    monkeypatch.setenv("MAX_WAIT_HOURS", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.schedule_file == "/etc/shuttle/schedule.yaml"
    assert config.timezone == "Europe/Moscow"
    assert config.wait_horizon == timedelta(hours=5)
    assert config.log_level == "DEBUG"


def test_config_validates_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    monkeypatch.setenv("TIMEZONE", "Mars/Olympus")

    with pytest.raises(ValueError, match="Unknown timezone"):
        AppConfig(_env_file=None)


def test_config_validates_max_wait_hours(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a non-positive wait horizon, when loading config, then validation error is raised."""
    monkeypatch.setenv("MAX_WAIT_HOURS", "0")

    with pytest.raises(ValueError, match="max_wait_hours must be greater than 0"):
        AppConfig(_env_file=None)


def test_config_applies_toml_overrides(tmp_path: Path) -> None:
    """Given a TOML file, when loading overrides, then its sections replace the defaults."""
    toml_path = tmp_path / "config.toml"
    toml_path.write_text(
        """
[schedule]
file = "/srv/schedule.yaml"
max_wait_hours = 4

[bot]
timezone = "Europe/Moscow"
monetization_message = "Спонсор выпуска."
""",
        encoding="utf-8",
    )
    config = AppConfig(config_file=str(toml_path), _env_file=None)

    data = config.load_toml_overrides()

    assert data["schedule"]["file"] == "/srv/schedule.yaml"
    assert config.schedule_file == "/srv/schedule.yaml"
    assert config.wait_horizon == timedelta(hours=4)
    assert config.timezone == "Europe/Moscow"
    assert config.monetization_message == "Спонсор выпуска."


def test_config_rejects_invalid_toml_timezone(tmp_path: Path) -> None:
    """Given a TOML file with an unknown timezone, when loading overrides, then ValueError is raised."""
    toml_path = tmp_path / "config.toml"
    toml_path.write_text('[bot]\ntimezone = "Nowhere/Land"\n', encoding="utf-8")
    config = AppConfig(config_file=str(toml_path), _env_file=None)

    with pytest.raises(ValueError, match="Unknown timezone"):
        config.load_toml_overrides()


def test_config_without_toml_file_has_no_overrides() -> None:
    """Given config_file is None, when loading overrides, then nothing changes."""
    config = AppConfig(config_file=None, _env_file=None)

    assert config.load_toml_overrides() == {}
    assert config.schedule_file == "schedule.yaml"


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading overrides, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml", _env_file=None)

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


@pytest.mark.parametrize(
    ("toml_text", "message"),
    [
        ("[schedule]\nmax_wait_hours = [1]\n", "max_wait_hours must be a number"),
        ("[bot]\ntimezone = 5\n", "timezone must be a string"),
    ],
)
def test_config_rejects_wrongly_typed_toml_values(
    tmp_path: Path, toml_text: str, message: str
) -> None:
    """Given a TOML value of the wrong type, when loading overrides, then ValueError is raised."""
    toml_path = tmp_path / "config.toml"
    toml_path.write_text(toml_text, encoding="utf-8")
    config = AppConfig(config_file=str(toml_path), _env_file=None)

    with pytest.raises(ValueError, match=message):
        config.load_toml_overrides()
