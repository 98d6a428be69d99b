"""Non-interactive picker."""

from .Picker import Picker


class _FirstCandidatePicker(Picker):
    """Always takes the first candidate, in line order."""

    def _choose(self, candidates: list[str]) -> str | None:
        return candidates[0]
