"""Tests for configuration."""

from pathlib import Path

import pytest

from event_presets.config import PresetConfig

ENV_VARS = (
    "DATA_DIR",
    "PRESETS_FILE",
    "CALENDAR_FILE",
    "AUTHORIZATION_FILE",
    "LOG_DIR",
    "LOG_FILENAME",
    "CALENDAR_NAME",
    "ASSUME_ACCESS_GRANTED",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables set outside the test."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_preset_config_defaults():
    """Test PresetConfig default values."""
    config = PresetConfig()
    assert config.data_dir == Path("data")
    assert config.presets_file == Path("data/presets.json")
    assert config.calendar_file == Path("data/calendar.ics")
    assert config.log_dir == Path("logs")
    assert config.log_filename == "event_presets.log"
    assert config.calendar_name == "Presets"
    assert config.assume_access_granted is False


def test_preset_config_from_env_data_dir(monkeypatch):
    """Test DATA_DIR moves every data file."""
    monkeypatch.setenv("DATA_DIR", "/custom/data")
    config = PresetConfig.from_env()
    assert config.data_dir == Path("/custom/data")
    assert config.presets_file.parent == Path("/custom/data")
    assert config.calendar_file.parent == Path("/custom/data")
    assert config.authorization_file.parent == Path("/custom/data")


def test_preset_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("DATA_DIR", "/custom/data")
    monkeypatch.setenv("PRESETS_FILE", "/elsewhere/presets.json")
    monkeypatch.setenv("CALENDAR_FILE", "/elsewhere/work.ics")
    monkeypatch.setenv("AUTHORIZATION_FILE", "/elsewhere/auth.json")
    monkeypatch.setenv("LOG_DIR", "/var/log/presets")
    monkeypatch.setenv("LOG_FILENAME", "presets.log")
    monkeypatch.setenv("CALENDAR_NAME", "Work")
    monkeypatch.setenv("ASSUME_ACCESS_GRANTED", "yes")

    config = PresetConfig.from_env()
    assert config.presets_file == Path("/elsewhere/presets.json")
    assert config.calendar_file == Path("/elsewhere/work.ics")
    assert config.authorization_file == Path("/elsewhere/auth.json")
    assert config.log_dir == Path("/var/log/presets")
    assert config.log_filename == "presets.log"
    assert config.calendar_name == "Work"
    assert config.assume_access_granted is True


def test_preset_config_empty_calendar_name(monkeypatch):
    """Test an empty CALENDAR_NAME keeps the default."""
    monkeypatch.setenv("CALENDAR_NAME", "")
    config = PresetConfig.from_env()
    assert config.calendar_name == "Presets"


def test_preset_config_invalid_assume_access_granted(monkeypatch):
    """Test handling invalid ASSUME_ACCESS_GRANTED."""
    monkeypatch.setenv("ASSUME_ACCESS_GRANTED", "maybe")
    config = PresetConfig.from_env()
    # Should fall back to default
    assert config.assume_access_granted is False
