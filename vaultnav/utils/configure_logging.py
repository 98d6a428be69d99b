"""Configure the package logger (single configuration per process)."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME, VAULTNAV_HOME_ENV, VAULTNAV_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, debug: bool = False) -> None:
    """Configure unified vaultnav logging.

    Modules log through ``logging.getLogger(__name__)``; everything under
    the ``vaultnav`` logger ends up in ``<home>/vaultnav.log``.

    Args:
        home: Path to the vaultnav home directory. If None, derived from environment.
        debug: Lower the package logger to DEBUG.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("vaultnav")
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get(VAULTNAV_HOME_ENV)
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / VAULTNAV_HOME_EXT

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
