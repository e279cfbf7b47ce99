"""Repository for the archived list of presets."""

import json
import logging
import os
from pathlib import Path

from event_presets.exceptions import PresetArchiveError
from event_presets.models.preset import Preset

logger = logging.getLogger(__name__)


class PresetRepository:
    """Loads and saves the ordered preset list as a JSON file."""

    def __init__(self, path: Path):
        """
        Initialize repository.

        Args:
            path: JSON archive file
        """
        self.path = path

    def load(self) -> list[Preset]:
        """
        Load presets in their saved order.

        A missing or unreadable archive yields an empty list. Entries that
        cannot be decoded are skipped.
        """
        if not self.path.exists():
            logger.debug(f"No preset archive at {self.path}")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load presets from {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Preset archive {self.path} does not contain a list")
            return []

        presets = []
        for index, entry in enumerate(data):
            preset = Preset.from_dict(entry)
            if preset is None:
                logger.warning(f"Skipping undecodable preset #{index} in {self.path}")
                continue
            presets.append(preset)

        logger.info(f"Loaded {len(presets)} presets from {self.path}")
        return presets

    def save(self, presets: list[Preset]) -> None:
        """
        Save presets, replacing the archive atomically.

        Raises:
            PresetArchiveError: If the archive cannot be written
        """
        payload = json.dumps([preset.to_dict() for preset in presets], indent=2)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise PresetArchiveError(f"Failed to save presets to {self.path}: {e}") from e

        logger.debug(f"Saved {len(presets)} presets to {self.path}")
