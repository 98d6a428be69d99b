"""Picker capability descriptor."""

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class PickerCapability:
    """Whether an interactive picker can be shown.

    Detected once and handed to whatever builds pickers, instead of
    checking for a terminal at every call site.
    """

    interactive: bool

    @classmethod
    def detect(cls, mode: str = "auto", stdin: TextIO | None = None, stdout: TextIO | None = None) -> "PickerCapability":
        """Resolve a configured picker mode into a capability.

        Args:
            mode: "interactive", "first", or "auto" (interactive only when
                both stdin and stdout are terminals)
        """
        if mode == "interactive":
            return cls(interactive=True)
        if mode == "first":
            return cls(interactive=False)
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        return cls(interactive=_isatty(stdin) and _isatty(stdout))


def _isatty(stream: TextIO | None) -> bool:
    try:
        return bool(stream is not None and stream.isatty())
    except (AttributeError, ValueError):
        return False
