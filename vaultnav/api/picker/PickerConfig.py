"""Picker configuration."""

from __future__ import annotations

__all__ = ["PickerConfig"]

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PickerConfig(BaseModel):
    """How candidates are disambiguated.

    ``auto`` detects an interactive terminal once, when the picker is built.
    """

    model_config = ConfigDict(extra="forbid")

    mode: Literal["auto", "interactive", "first"] = Field("auto", description="Picker selection mode")
