"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.normalize_path import normalize_path


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(..., description="Path to vault root directory")
    audio_dir: str = Field("", description="Root directory searched for audio links, empty if unset")
    template_dir: str = Field("", description="Directory holding Yaml-Template.md, empty if unset")
    daily_dir: str = Field("Every day info", description="Daily note folder, relative to the vault root")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("vault.base_dir is required")
        return str(normalize_path(v))

    @field_validator("audio_dir", "template_dir")
    @classmethod
    def _normalize_optional_dir(cls, v: str) -> str:
        if not v.strip():
            return ""
        return str(normalize_path(v))

    @property
    def root(self) -> str:
        """Vault root with a trailing separator.

        Resolved paths are built as ``root + relative_path`` (plain
        concatenation, no further normalization).
        """
        return self.base_dir.rstrip("/") + "/"
