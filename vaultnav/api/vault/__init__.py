"""Vault API module: vault configuration, daily notes and templates."""

from .apply_template import apply_template
from .daily_note_path import daily_note_path
from .render_template import render_template
from .shift_date import shift_date
from .strip_frontmatter_lines import strip_frontmatter_lines
from .VaultConfig import VaultConfig

__all__ = [
    "VaultConfig",
    "apply_template",
    "daily_note_path",
    "render_template",
    "shift_date",
    "strip_frontmatter_lines",
]
