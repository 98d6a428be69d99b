"""Target classifier (UNO: single function)."""

import re

from ...constants import IMAGE_EXTENSIONS, NOTE_EXTENSION
from .TargetKind import TargetKind

_FINAL_EXTENSION = re.compile(r".*\.(.*)$", re.DOTALL)


def classify_target(sanitized: str) -> TargetKind:
    """Classify a sanitized reference by its final extension.

    Matching is case-sensitive: ``md`` is a note, ``avif``/``png``/``jpg``
    are images, and everything else (``PNG``, ``mp3``, no extension) is
    treated as an audio search term.
    """
    match = _FINAL_EXTENSION.match(sanitized)
    extension = match.group(1) if match else None
    if extension == NOTE_EXTENSION:
        return TargetKind.NOTE
    if extension in IMAGE_EXTENSIONS:
        return TargetKind.IMAGE
    return TargetKind.AUDIO
