"""Index configuration management."""

from __future__ import annotations

__all__ = ["IndexConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IndexConfig(BaseModel):
    """Configuration for the external file/tag/backlink index.

    ``cli`` shells out to the sqlite3 binary with string-interpolated SQL.
    ``sqlite`` opens the same file read-only in-process and binds parameters.
    """

    model_config = ConfigDict(extra="forbid")

    type: str = Field("cli", description="Index backend type")
    file_name: str = Field("markdown_data.db", description="Index file name, relative to the vault root")
    binary: str = Field("sqlite3", description="sqlite3 executable used by the cli backend")

    @field_validator("type")
    @classmethod
    def _known_type(cls, v: str) -> str:
        if v not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported index type: {v!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return v


_BACKEND_REGISTRY = {
    "cli": "vaultnav.api.index._cli",
    "sqlite": "vaultnav.api.index._sqlite",
}
