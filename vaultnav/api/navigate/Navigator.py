"""Navigator: resolver, picker, index and media programs built from one config."""

import logging
from collections.abc import Callable
from typing import Any

from ...constants import PLAYER_PID_FILE_NAME
from ...utils.remove_prefix import remove_prefix
from ..config.NavConfig import NavConfig
from ..index.Index import Index
from ..media.AudioPlayer import AudioPlayer
from ..media.FileSearch import FileSearch
from ..media.ImageViewer import ImageViewer
from ..picker.Picker import Picker
from ..picker.PickerCapability import PickerCapability
from ..resolver.NavigationTarget import NavigationTarget
from ..resolver.Resolution import Resolution
from ..resolver.ResolutionResult import ResolutionResult
from ..resolver.Resolver import Resolver
from ..wikilink.find_wikilink_at_cursor import find_wikilink_at_cursor
from ..wikilink.TargetKind import TargetKind

logger = logging.getLogger(__name__)

ACTION_OPEN = "open"
ACTION_VIEW = "view"
ACTION_PLAY = "play"
ACTION_NONE = "none"


class Navigator:
    """Entry point for the three navigation flows.

    ``open_link`` follows the link under the cursor, ``backlinks`` lists files
    linking to the link (or the current file), and ``tags`` goes from a tag
    to a tagged file. Opening notes belongs to the editor, so note paths are
    handed to ``on_note`` and returned.
    """

    def __init__(
        self,
        config: NavConfig,
        picker: Picker | None = None,
        index: Index | None = None,
        file_search: FileSearch | None = None,
        viewer: ImageViewer | None = None,
        player: AudioPlayer | None = None,
    ):
        self.config = config
        self.root = config.vault.root
        self.index = index or Index(config.index, config.index_path)
        self.picker = picker or Picker.create(PickerCapability.detect(config.picker.mode))
        self.file_search = file_search or FileSearch(config.media.search_binary)
        self.viewer = viewer or ImageViewer(config.media.viewer)
        self.player = player or AudioPlayer(
            config.media.player,
            cwd=config.vault.base_dir,
            pid_file=NavConfig.get_home_dir() / PLAYER_PID_FILE_NAME,
        )
        self.resolver = Resolver(
            vault_root=self.root,
            index=self.index,
            picker=self.picker,
            file_search=self.file_search,
            audio_root=config.vault.audio_dir,
        )

    def open_link(
        self,
        line: str,
        cursor_offset: int,
        on_note: Callable[[str], None] | None = None,
    ) -> tuple[Resolution, str]:
        """Resolve the link under the cursor and act on it.

        Returns:
            The resolution trace and the action taken (open, view, play or none)
        """
        actions: list[str] = []

        def dispatch(target: NavigationTarget) -> None:
            actions.append(self._dispatch(target, on_note))

        resolution = self.resolver.resolve(line, cursor_offset, dispatch)
        return resolution, actions[0] if actions else ACTION_NONE

    def _dispatch(self, target: NavigationTarget, on_note: Callable[[str], None] | None) -> str:
        if target.kind is TargetKind.NOTE:
            logger.debug(f"Opening markdown file: {target.path}")
            if on_note is not None:
                on_note(target.path)
            return ACTION_OPEN
        if target.kind is TargetKind.IMAGE:
            return ACTION_VIEW if self.viewer.show(target.path) else ACTION_NONE
        return ACTION_PLAY if self.player.start(target.path) else ACTION_NONE

    def backlinks(
        self,
        line: str = "",
        cursor_offset: int = 0,
        current_file: str = "",
        on_note: Callable[[str], None] | None = None,
    ) -> dict[str, Any]:
        """Files linking to the link under the cursor, or to the current file.

        With a link under the cursor, the first index match for that link is
        the fragment; otherwise the current file path minus the vault root.
        """
        token = find_wikilink_at_cursor(line, cursor_offset) if line else None
        if token is not None:
            matches = self.index.query_backlinks_to(token.raw_content)
            fragment = matches[0] if matches else ""
        else:
            fragment = remove_prefix(current_file, self.root)

        found: dict[str, Any] = {"fragment": fragment, "candidates": [], "target": ""}
        if not fragment:
            # An empty LIKE fragment would match every linked file
            logger.debug("No link or current file to search backlinks for")
            return found

        result = ResolutionResult.from_lines(self.index.query_backlinks_from(fragment))
        found["candidates"] = list(result.candidates)
        self.picker.pick(found["candidates"], self._choose_note(found, on_note))
        return found

    def tags(self, tag: str = "", on_note: Callable[[str], None] | None = None) -> dict[str, Any]:
        """Pick a tag (unless given), then a file carrying it."""
        found: dict[str, Any] = {"tag": tag, "tags": [], "candidates": [], "target": ""}
        if not tag:
            found["tags"] = self.index.query_all_tags()

            def choose_tag(chosen: str) -> None:
                found["tag"] = chosen

            self.picker.pick(found["tags"], choose_tag)
            if not found["tag"]:
                return found

        result = ResolutionResult.from_lines(self.index.query_files_by_tag(found["tag"]))
        found["candidates"] = list(result.candidates)
        self.picker.pick(found["candidates"], self._choose_note(found, on_note))
        return found

    def _choose_note(self, found: dict[str, Any], on_note: Callable[[str], None] | None) -> Callable[[str], None]:
        def choose(chosen: str) -> None:
            found["target"] = self.root + chosen
            logger.debug(f"Editing: {found['target']}")
            if on_note is not None:
                on_note(found["target"])

        return choose
