"""TargetKind enumeration."""

from enum import Enum


class TargetKind(str, Enum):
    """What a sanitized reference points at."""

    NOTE = "note"
    IMAGE = "image"
    AUDIO = "audio"
