"""Configuration for event presets."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from event_presets.constants import (
    AUTHORIZATION_FILENAME,
    CALENDAR_FILENAME,
    DEFAULT_CALENDAR_NAME,
    PRESETS_FILENAME,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class PresetConfig(BaseModel):
    """Preset configuration with Pydantic validation."""

    # Storage paths
    data_dir: Path = Field(default=Path("data"))
    presets_file: Path = Field(default=Path("data") / PRESETS_FILENAME)
    calendar_file: Path = Field(default=Path("data") / CALENDAR_FILENAME)
    authorization_file: Path = Field(default=Path("data") / AUTHORIZATION_FILENAME)
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="event_presets.log")

    # Calendar
    calendar_name: str = Field(default=DEFAULT_CALENDAR_NAME, min_length=1)

    # Access prompt
    assume_access_granted: bool = Field(default=False)

    @classmethod
    def from_env(cls) -> "PresetConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file
        load_dotenv()

        config_dict = {}

        # Storage paths; files default to living inside DATA_DIR
        if "DATA_DIR" in os.environ:
            data_dir = Path(os.environ["DATA_DIR"])
            config_dict["data_dir"] = data_dir
            config_dict["presets_file"] = data_dir / PRESETS_FILENAME
            config_dict["calendar_file"] = data_dir / CALENDAR_FILENAME
            config_dict["authorization_file"] = data_dir / AUTHORIZATION_FILENAME
        if "PRESETS_FILE" in os.environ:
            config_dict["presets_file"] = Path(os.environ["PRESETS_FILE"])
        if "CALENDAR_FILE" in os.environ:
            config_dict["calendar_file"] = Path(os.environ["CALENDAR_FILE"])
        if "AUTHORIZATION_FILE" in os.environ:
            config_dict["authorization_file"] = Path(os.environ["AUTHORIZATION_FILE"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Calendar
        if os.environ.get("CALENDAR_NAME"):
            config_dict["calendar_name"] = os.environ["CALENDAR_NAME"]

        # Access prompt
        if "ASSUME_ACCESS_GRANTED" in os.environ:
            value = os.environ["ASSUME_ACCESS_GRANTED"].strip().lower()
            if value in _TRUE_VALUES:
                config_dict["assume_access_granted"] = True
            elif value in _FALSE_VALUES:
                config_dict["assume_access_granted"] = False
            # Keep default if invalid

        return cls(**config_dict)
