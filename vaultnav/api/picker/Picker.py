"""Picker public API."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from ..index.split_result_lines import split_result_lines
from .PickerCapability import PickerCapability

logger = logging.getLogger(__name__)


class Picker(ABC):
    """Choose exactly one candidate and hand it to a callback.

    Candidates come either as newline-delimited text (one candidate per
    non-empty line) or as a sequence. With no candidates, or when nothing
    is selected, the callback is not called.
    """

    @classmethod
    def create(cls, capability: PickerCapability, **kwargs) -> "Picker":
        """Build the picker matching ``capability``.

        Keyword arguments (``console``, ``stream``, ``title``) are passed to
        the interactive picker only.
        """
        if capability.interactive:
            from ._PromptPicker import _PromptPicker

            return _PromptPicker(**kwargs)
        from ._FirstCandidatePicker import _FirstCandidatePicker

        return _FirstCandidatePicker()

    def pick(self, candidates: str | Sequence[str], on_chosen: Callable[[str], None]) -> None:
        items = split_candidates(candidates)
        if not items:
            logger.debug("No candidates to pick")
            return
        choice = self._choose(items)
        if choice is None:
            logger.debug("No selection made")
            return
        logger.debug(f"Selected candidate: {choice}")
        on_chosen(choice)

    @abstractmethod
    def _choose(self, candidates: list[str]) -> str | None:
        """Return one of ``candidates`` (never empty), or None for no selection."""
        pass


def split_candidates(candidates: str | Sequence[str]) -> list[str]:
    if isinstance(candidates, str):
        return split_result_lines(candidates)
    return [c for c in candidates if c]
