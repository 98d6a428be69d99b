"""Navigate open API command.

CLI: vaultnav open <line> --cursor N [--wait]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..resolver.ResolutionState import ResolutionState
from ..wikilink.TargetKind import TargetKind

_RESOLVED = {ResolutionState.RESOLVED_NOTE, ResolutionState.RESOLVED_IMAGE, ResolutionState.RESOLVED_AUDIO}


def cmd_open(line: str, cursor: int, wait: bool = False) -> StageResult:
    """Follow the wikilink under the cursor.

    Args:
        line: Line of text holding the link
        cursor: 0-based cursor offset in the line
        wait: For audio, block until playback ends
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NavConfig import NavConfig
        from .Navigator import Navigator

        empty = {"token": "", "reference": "", "kind": "", "state": "", "candidates": [], "target": "", "action": "none"}

        yield (0.1, "Loading configuration...")
        try:
            config = NavConfig.load()
            navigator = Navigator(config)
        except ValueError as e:
            result_obj.output = {**empty, "errors": [f"Failed to load config: {e}"], "warnings": []}
            result_obj.result = f"Open failed: {e}"
            result_obj.success = False
            return

        yield (0.4, "Resolving link under cursor...")
        resolution, action = navigator.open_link(line, cursor)

        warnings: list[str] = []
        if resolution.kind in (TargetKind.NOTE, TargetKind.IMAGE) and not navigator.index.is_available():
            warnings.append(f"Index unavailable: {config.index_path}")
        if resolution.kind is TargetKind.AUDIO and not config.vault.audio_dir:
            warnings.append("vault.audio_dir is not configured")

        if wait and navigator.player.is_playing:
            yield (0.8, "Waiting for playback to finish...")
            navigator.player.wait()

        yield (1.0, "Complete")
        result_obj.output = {**resolution.to_dict(), "action": action, "errors": [], "warnings": warnings}
        result_obj.success = resolution.state in _RESOLVED
        if resolution.token is None:
            result_obj.result = "No wikilink under cursor"
        elif result_obj.success and resolution.target is not None:
            result_obj.result = f"Resolved {resolution.target.kind.value}: {resolution.target.path}"
        elif resolution.state is ResolutionState.AMBIGUOUS:
            result_obj.result = f"No candidate chosen for [[{resolution.token.raw_content}]]"
        else:
            result_obj.result = f"Nothing found for [[{resolution.token.raw_content}]]"

    return StageResult(
        announce=f"Resolving link at offset {cursor}...",
        progress_callback=do_work,
    )
