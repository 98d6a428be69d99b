"""Wikilink resolver."""

import logging
from collections.abc import Callable

from ...constants import NOTE_EXTENSION
from ..index.Index import Index
from ..index.split_result_lines import split_result_lines
from ..media.FileSearch import FileSearch
from ..picker.Picker import Picker
from ..wikilink.classify_target import classify_target
from ..wikilink.find_wikilink_at_cursor import find_wikilink_at_cursor
from ..wikilink.sanitize_backlink import sanitize_backlink
from ..wikilink.TargetKind import TargetKind
from .NavigationTarget import NavigationTarget
from .Resolution import Resolution
from .ResolutionResult import ResolutionResult
from .ResolutionState import ResolutionState

logger = logging.getLogger(__name__)

_RESOLVED_STATE = {
    TargetKind.NOTE: ResolutionState.RESOLVED_NOTE,
    TargetKind.IMAGE: ResolutionState.RESOLVED_IMAGE,
    TargetKind.AUDIO: ResolutionState.RESOLVED_AUDIO,
}


class Resolver:
    """Turn the wikilink under a cursor into one navigation target.

    Scanner -> sanitizer -> classifier -> index or file search -> picker.
    The target callback fires at most once per ``resolve`` call. With
    several candidates the picker chooses; the run then finishes as if that
    candidate had been the only one, or stays AMBIGUOUS if nothing is picked.

    Path construction by kind:
      note   vault_root + index path (or the raw link text + ".md")
      image  "./" + index path (relative to the working directory)
      audio  the file search result line, as returned
    """

    def __init__(
        self,
        vault_root: str,
        index: Index,
        picker: Picker,
        file_search: FileSearch,
        audio_root: str = "",
    ):
        self.vault_root = vault_root
        self.index = index
        self.picker = picker
        self.file_search = file_search
        self.audio_root = audio_root

    def resolve(
        self,
        line: str,
        cursor_offset: int,
        on_target: Callable[[NavigationTarget], None] | None = None,
    ) -> Resolution:
        """Resolve the wikilink at ``cursor_offset`` (0-based) in ``line``."""
        resolution = Resolution()

        token = find_wikilink_at_cursor(line, cursor_offset)
        if token is None:
            logger.debug("No wikilink detected under cursor")
            return resolution
        resolution.token = token
        resolution.state = ResolutionState.TOKEN_FOUND

        reference = sanitize_backlink(token.raw_content)
        if not reference or reference == f".{NOTE_EXTENSION}":
            logger.debug(f"Nothing resolvable in [[{token.raw_content}]]")
            resolution.state = ResolutionState.UNRESOLVED
            return resolution
        resolution.reference = reference
        resolution.state = ResolutionState.SANITIZED

        kind = classify_target(reference)
        resolution.kind = kind
        resolution.state = ResolutionState.CLASSIFIED
        logger.debug(f"Link [[{token.raw_content}]] -> {reference} ({kind.value})")

        def emit(path: str) -> None:
            target = NavigationTarget(kind=kind, path=path)
            resolution.target = target
            if on_target is not None:
                on_target(target)

        raw = token.raw_content
        if kind is TargetKind.NOTE:
            resolution.result = ResolutionResult.from_lines(self.index.query_backlinks_to(raw))
            if resolution.result.is_empty:
                relative = raw if raw.endswith(f".{NOTE_EXTENSION}") else f"{raw}.{NOTE_EXTENSION}"
                resolution.state = ResolutionState.RESOLVED_NOTE
                emit(self.vault_root + relative)
                return resolution
            return self._settle(resolution, lambda chosen: emit(self.vault_root + chosen))

        if kind is TargetKind.IMAGE:
            resolution.result = ResolutionResult.from_lines(self.index.query_backlinks_to(raw))
            return self._settle(resolution, lambda chosen: emit(f"./{chosen}"))

        resolution.result = ResolutionResult.from_lines(
            split_result_lines(self.file_search.search(self.audio_root, raw))
        )
        return self._settle(resolution, emit)

    def _settle(self, resolution: Resolution, choose: Callable[[str], None]) -> Resolution:
        result = resolution.result
        kind = resolution.kind
        if result.is_empty or kind is None:
            logger.warning(f"No target found for {resolution.reference}")
            resolution.state = ResolutionState.UNRESOLVED
            return resolution

        def chosen(path: str) -> None:
            resolution.state = _RESOLVED_STATE[kind]
            choose(path)

        if result.is_single:
            chosen(result.path)
            return resolution
        # Stays AMBIGUOUS if the picker selects nothing
        logger.debug(f"{len(result.candidates)} candidates for {resolution.reference}")
        resolution.state = ResolutionState.AMBIGUOUS
        self.picker.pick(list(result.candidates), chosen)
        return resolution
