"""Abstract base class for index backends."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    """Run one read-only query and return its rows as newline-delimited text.

    Backends never raise for an unavailable index or a failed query; they
    log and return an empty string.
    """

    @abstractmethod
    def select(self, sql_template: str, value: str | None = None) -> str:
        """Run ``sql_template`` with ``value`` in its ``{}`` slot."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """True if the index file exists and the backend can query it."""
        pass
