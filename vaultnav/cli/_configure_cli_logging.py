"""Set up file logging for a CLI run."""

from vaultnav.api.config.NavConfig import NavConfig
from vaultnav.utils.configure_logging import configure_logging


def _configure_cli_logging() -> None:
    """Configure logging under the vaultnav home, honoring ``debug`` from the config.

    A missing or broken config leaves the level at INFO; the command itself
    reports the config error.
    """
    try:
        debug = NavConfig.load().debug
    except ValueError:
        debug = False
    configure_logging(NavConfig.get_home_dir(), debug=debug)
