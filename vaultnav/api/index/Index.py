"""Index public API."""

import importlib
import logging

from ._AbstractImpl import _AbstractImpl
from ._queries import ALL_TAGS, BACKLINKS_FROM, BACKLINKS_TO, FILES_BY_TAG
from .IndexConfig import _BACKEND_REGISTRY, IndexConfig
from .split_result_lines import split_result_lines
from .trim_result_terminator import trim_result_terminator

logger = logging.getLogger(__name__)


class Index:
    """Facade for index lookups.

    Delegates to a backend chosen by ``IndexConfig.type``. Every lookup
    returns a list of result lines; an unavailable index and an empty result
    look the same here, so callers that need to tell them apart check
    ``is_available()``.
    """

    def __init__(self, index_config: IndexConfig, index_path: str):
        self.index_config = index_config
        self.index_path = index_path
        backend_type = index_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        module = importlib.import_module(f"{_BACKEND_REGISTRY[backend_type]}._Impl")
        self._impl: _AbstractImpl = module._Impl(index_config, index_path)

    def is_available(self) -> bool:
        return self._impl.is_available()

    def run_query(self, sql_template: str, value: str | None = None) -> str:
        """Raw result text, including its trailing line terminator."""
        return self._impl.select(sql_template, value)

    def _lines(self, sql_template: str, value: str | None = None) -> list[str]:
        return split_result_lines(trim_result_terminator(self.run_query(sql_template, value)))

    def query_backlinks_to(self, reference: str) -> list[str]:
        """Files whose stored backlink text equals ``reference`` exactly."""
        return self._lines(BACKLINKS_TO, reference)

    def query_backlinks_from(self, fragment_or_path: str) -> list[str]:
        """Files linking to any file whose path contains the first line of ``fragment_or_path``."""
        fragment = fragment_or_path.splitlines()[0] if fragment_or_path else ""
        return self._lines(BACKLINKS_FROM, f"%{fragment}%")

    def query_files_by_tag(self, tag: str) -> list[str]:
        return self._lines(FILES_BY_TAG, tag)

    def query_all_tags(self) -> list[str]:
        return self._lines(ALL_TAGS)
