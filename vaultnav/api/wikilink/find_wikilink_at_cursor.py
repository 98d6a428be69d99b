"""Wikilink cursor scanner (UNO: single function)."""

import re

from .WikilinkToken import WikilinkToken

# Inner content may not contain brackets, so spans never nest or overlap
WIKILINK_PATTERN = re.compile(r"\[\[([^\[\]]+)\]\]")


def find_wikilink_at_cursor(line: str, cursor_offset: int) -> WikilinkToken | None:
    """Return the wikilink token the cursor sits in, if any.

    Args:
        line: One line of text
        cursor_offset: 0-based character offset of the cursor in ``line``

    Returns:
        The first span (left to right) that contains the cursor, or None
    """
    for match in WIKILINK_PATTERN.finditer(line):
        token = WikilinkToken(
            raw_content=match.group(1),
            start_offset=match.start(),
            end_offset=match.end(),
        )
        if token.contains(cursor_offset):
            return token
    return None
