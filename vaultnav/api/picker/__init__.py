"""Picker API module: choose one candidate out of many."""

from .Picker import Picker
from .PickerCapability import PickerCapability
from .PickerConfig import PickerConfig

__all__ = ["Picker", "PickerCapability", "PickerConfig"]
