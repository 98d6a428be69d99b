"""Media (viewer, player, file search) configuration."""

from __future__ import annotations

__all__ = ["MediaConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MediaConfig(BaseModel):
    """External programs used to show images, play audio and search files."""

    model_config = ConfigDict(extra="forbid")

    viewer: list[str] = Field(default_factory=lambda: ["timg"], description="Image viewer argv prefix")
    player: list[str] = Field(default_factory=lambda: ["vlc", "-I", "rc"], description="Audio player argv prefix")
    search_binary: str = Field("rg", description="ripgrep executable used for file search")

    @field_validator("viewer", "player")
    @classmethod
    def _non_empty_command(cls, v: list[str]) -> list[str]:
        if not v or not v[0].strip():
            raise ValueError("command must name an executable")
        return v
