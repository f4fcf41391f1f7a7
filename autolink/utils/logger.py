"""Logging setup for the autolink package."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(autolink_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified autolink logging.

    Args:
        autolink_home: Path to the autolink home directory. If None, derived from environment.
        level: Logging level name applied to the ``autolink`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if autolink_home is None:
        env_home = os.environ.get("AUTOLINK_HOME")
        autolink_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".autolink"

    autolink_home.mkdir(parents=True, exist_ok=True)
    log_file = autolink_home / "autolink.log"

    root_logger = logging.getLogger("autolink")
    # WARN is accepted in config; logging knows it as WARNING
    root_logger.setLevel("WARNING" if level == "WARN" else level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True

