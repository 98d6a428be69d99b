"""Backlink sanitizer (UNO: single function)."""

import re

from ...constants import NOTE_EXTENSION

_EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+$")


def sanitize_backlink(raw: str | None) -> str | None:
    """Normalize raw wikilink content into a file reference.

    Steps, in order: drop a ``#section`` anchor, drop a ``|alias``, drop
    one leading ``-``, trim whitespace, append ``.md`` when no extension
    remains.

    >>> sanitize_backlink("Note#Heading|Alias")
    'Note.md'
    >>> sanitize_backlink("-SubItem")
    'SubItem.md'
    >>> sanitize_backlink("diagram.png")
    'diagram.png'
    """
    if not raw:
        return None
    reference = raw.split("#", 1)[0]
    reference = reference.split("|", 1)[0]
    if reference.startswith("-"):
        reference = reference[1:]
    reference = reference.strip()
    if not _EXTENSION_PATTERN.search(reference):
        reference = f"{reference}.{NOTE_EXTENSION}"
    return reference
