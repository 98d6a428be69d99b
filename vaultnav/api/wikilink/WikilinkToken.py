"""WikilinkToken model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikilinkToken:
    """A ``[[...]]`` span found on a single line.

    Offsets are 0-based character positions in the line:
    ``start_offset`` is the first ``[`` and ``end_offset`` is one past the
    last ``]`` (half-open), so ``line[start_offset:end_offset]`` is the
    whole span including delimiters.
    """

    raw_content: str
    start_offset: int
    end_offset: int

    def contains(self, cursor_offset: int) -> bool:
        """True if a 0-based cursor binds to this token.

        The cursor must be strictly after the first opening bracket and no
        further than the last closing bracket.
        """
        return self.start_offset < cursor_offset < self.end_offset
