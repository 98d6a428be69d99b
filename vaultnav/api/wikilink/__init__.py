"""Wikilink recognition: cursor scanning, sanitizing and classification."""

from .classify_target import classify_target
from .find_wikilink_at_cursor import find_wikilink_at_cursor
from .sanitize_backlink import sanitize_backlink
from .TargetKind import TargetKind
from .WikilinkToken import WikilinkToken

__all__ = [
    "TargetKind",
    "WikilinkToken",
    "classify_target",
    "find_wikilink_at_cursor",
    "sanitize_backlink",
]
