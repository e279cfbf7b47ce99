"""CLI package for the event presets tool."""

import logging
import sys

from event_presets.config import PresetConfig
from event_presets.exceptions import PresetError


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: PresetConfig | None = None
) -> None:
    """Log everything to the log file and warnings (or per flags) to stderr.

    Args:
        verbose: Show info messages on the console
        quiet: Show only errors on the console
        config: Log location; read from the environment if not given
    """
    config = config or PresetConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)

    log_file = logging.FileHandler(config.log_dir / config.log_filename, encoding="utf-8")
    log_file.setLevel(logging.DEBUG)
    log_file.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    )

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(_console_level(verbose, quiet))
    stderr.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers = [log_file, stderr]


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    try:
        app()
    except PresetError as e:
        logging.getLogger(__name__).error(f"Preset error: {e}")
        sys.exit(1)


__all__ = ["main", "setup_logging"]
