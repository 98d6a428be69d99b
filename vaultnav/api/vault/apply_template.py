"""Prepend a rendered template to a note."""

from datetime import datetime

from ...constants import DATE_FORMAT, TIME_FORMAT
from ..index.split_result_lines import split_result_lines
from .render_template import render_template
from .strip_frontmatter_lines import strip_frontmatter_lines


def apply_template(
    template: str,
    note: str,
    title: str,
    now: datetime | None = None,
    replace_frontmatter: bool = False,
) -> str:
    """Render ``template`` for ``now`` and prepend it to ``note``.

    The rendered template and the note are joined without a separator and
    the result is rebuilt from its non-empty lines, so blank lines are
    dropped. With ``replace_frontmatter`` the note's own leading ``---``
    block is removed first.
    """
    now = now or datetime.now()
    if replace_frontmatter:
        note = "\n".join(strip_frontmatter_lines(note.splitlines()))
    rendered = render_template(template, now.strftime(DATE_FORMAT), now.strftime(TIME_FORMAT), title)
    lines = split_result_lines(rendered + note)
    return "\n".join(lines) + "\n" if lines else ""
