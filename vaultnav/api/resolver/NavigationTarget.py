"""NavigationTarget model (UNO: single model)."""

from dataclasses import dataclass

from ..wikilink.TargetKind import TargetKind


@dataclass(frozen=True)
class NavigationTarget:
    """Where to go: a note to open, an image to show or audio to play."""

    kind: TargetKind
    path: str
