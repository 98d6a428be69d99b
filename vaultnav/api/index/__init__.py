"""Index API module: read-only lookups against the file/tag/backlink index."""

from .escape_for_index_query import escape_for_index_query
from .Index import Index
from .IndexConfig import IndexConfig
from .split_result_lines import split_result_lines
from .trim_result_terminator import trim_result_terminator

__all__ = [
    "Index",
    "IndexConfig",
    "escape_for_index_query",
    "split_result_lines",
    "trim_result_terminator",
]
