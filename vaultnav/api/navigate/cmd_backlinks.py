"""Navigate backlinks API command.

CLI: vaultnav backlinks [line] [--cursor N] [--file PATH]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_backlinks(line: str = "", cursor: int = 0, current_file: str = "") -> StageResult:
    """List files linking to the wikilink under the cursor, or to the current file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NavConfig import NavConfig
        from .Navigator import Navigator

        yield (0.1, "Loading configuration...")
        try:
            config = NavConfig.load()
            navigator = Navigator(config)
        except ValueError as e:
            result_obj.output = {
                "errors": [f"Failed to load config: {e}"],
                "warnings": [],
                "fragment": "",
                "candidates": [],
                "target": "",
            }
            result_obj.result = f"Backlinks failed: {e}"
            result_obj.success = False
            return

        warnings: list[str] = []
        if not navigator.index.is_available():
            warnings.append(f"Index unavailable: {config.index_path}")

        yield (0.4, "Querying backlinks...")
        found = navigator.backlinks(line, cursor, current_file)

        yield (1.0, "Complete")
        result_obj.output = {**found, "errors": [], "warnings": warnings}
        result_obj.success = bool(found["target"])
        if result_obj.success:
            result_obj.result = f"Backlink: {found['target']}"
        elif found["candidates"]:
            result_obj.result = f"No backlink chosen out of {len(found['candidates'])}"
        else:
            result_obj.result = f"No backlinks found for '{found['fragment']}'"

    return StageResult(
        announce="Searching backlinks...",
        progress_callback=do_work,
    )
