"""ResolutionState enumeration."""

from enum import Enum


class ResolutionState(str, Enum):
    """Resolver states; the last five are terminal."""

    IDLE = "idle"
    TOKEN_FOUND = "token_found"
    SANITIZED = "sanitized"
    CLASSIFIED = "classified"
    RESOLVED_NOTE = "resolved_note"
    RESOLVED_IMAGE = "resolved_image"
    RESOLVED_AUDIO = "resolved_audio"
    AMBIGUOUS = "ambiguous"
    UNRESOLVED = "unresolved"
