"""Split newline-delimited result text (UNO: single function)."""

import re

_LINE_PATTERN = re.compile(r"[^\r\n]+")


def split_result_lines(text: str) -> list[str]:
    """Return the non-empty lines of ``text`` in order."""
    return _LINE_PATTERN.findall(text)
