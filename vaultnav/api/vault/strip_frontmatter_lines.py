"""Drop a leading YAML frontmatter block from note lines."""

import re
from collections.abc import Iterable

_DELIMITER = re.compile(r"^---\s*$")


def strip_frontmatter_lines(lines: Iterable[str]) -> list[str]:
    """Return the note body: leading blank lines and a leading ``---`` block removed.

    An unterminated block swallows the rest of the note, so the result is
    empty. Later ``---`` lines (horizontal rules) are body content.

    >>> strip_frontmatter_lines(["", "---", "tags: [a]", "---", "# Title", "", "text"])
    ['# Title', '', 'text']
    """
    body: list[str] = []
    in_frontmatter = False
    content_started = False
    for line in lines:
        if content_started:
            body.append(line)
        elif in_frontmatter:
            if _DELIMITER.match(line):
                in_frontmatter = False
                content_started = True
        elif _DELIMITER.match(line):
            in_frontmatter = True
        elif line.strip():
            content_started = True
            body.append(line)
    return body
