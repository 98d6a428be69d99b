"""Config API module."""

from .NavConfig import NavConfig

__all__ = ["NavConfig"]
