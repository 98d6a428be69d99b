"""Top-level vaultnav configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME, VAULTNAV_HOME_ENV, VAULTNAV_HOME_EXT
from ..index.IndexConfig import IndexConfig
from ..media.MediaConfig import MediaConfig
from ..picker.PickerConfig import PickerConfig
from ..vault.VaultConfig import VaultConfig


class NavConfig(BaseModel):
    """Top-level configuration for vaultnav."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    index: IndexConfig = Field(default_factory=IndexConfig)
    media: MediaConfig = Field(default_factory=MediaConfig)
    picker: PickerConfig = Field(default_factory=PickerConfig)
    debug: bool = False

    @property
    def path(self) -> Path:
        """Path to config file."""
        return self.get_config_path()

    @property
    def index_path(self) -> str:
        """Index file location: vault root + configured file name."""
        return self.vault.root + self.index.file_name

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get vaultnav home directory based on VAULTNAV_HOME or default to ~/.vaultnav."""
        home_env = os.environ.get(VAULTNAV_HOME_ENV)
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / VAULTNAV_HOME_EXT

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file under the vaultnav home directory."""
        return cls.get_home_dir() / CONFIG_FILE_NAME

    @classmethod
    def load(cls) -> "NavConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert NavConfig instance to a dictionary for serialization."""
        return {
            "vault": self.vault.model_dump(),
            "index": self.index.model_dump(),
            "media": self.media.model_dump(),
            "picker": self.picker.model_dump(),
            "debug": self.debug,
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
