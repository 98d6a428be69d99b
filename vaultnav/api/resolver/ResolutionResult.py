"""ResolutionResult model (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolutionResult:
    """Zero, one or many candidate paths.

    Candidates are de-duplicated, keeping the first occurrence, so a file
    reached through several backlinks appears once.
    """

    candidates: tuple[str, ...] = ()

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ResolutionResult":
        return cls(candidates=tuple(dict.fromkeys(line for line in lines if line)))

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    @property
    def is_single(self) -> bool:
        return len(self.candidates) == 1

    @property
    def is_multiple(self) -> bool:
        return len(self.candidates) > 1

    @property
    def path(self) -> str:
        """The only candidate."""
        if not self.is_single:
            raise ValueError(f"Expected a single candidate, got {len(self.candidates)}")
        return self.candidates[0]
