"""Shared constants for vaultnav."""

VAULTNAV_HOME_ENV = "VAULTNAV_HOME"
VAULTNAV_HOME_EXT = ".vaultnav"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "vaultnav.log"

# Extensions that route a link to the image viewer (matched case-sensitively)
IMAGE_EXTENSIONS = frozenset({"avif", "png", "jpg"})
NOTE_EXTENSION = "md"

TEMPLATE_FILE_NAME = "Yaml-Template.md"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"
PLAYER_PID_FILE_NAME = "player.pid"
