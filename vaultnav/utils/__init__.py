"""vaultnav utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .normalize_path import normalize_path
from .remove_prefix import remove_prefix

__all__ = [
    "configure_logging",
    "normalize_path",
    "remove_prefix",
]
