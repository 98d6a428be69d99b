"""Navigate tags API command.

CLI: vaultnav tags [TAG]
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_tags(tag: str = "") -> StageResult:
    """Pick a tag (unless given), then a file carrying it."""

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
                "tag": tag,
                "tags": [],
                "candidates": [],
                "target": "",
            }
            result_obj.result = f"Tag search failed: {e}"
            result_obj.success = False
            return

        warnings: list[str] = []
        if not navigator.index.is_available():
            warnings.append(f"Index unavailable: {config.index_path}")

        yield (0.4, "Querying tags...")
        found = navigator.tags(tag)

        yield (1.0, "Complete")
        result_obj.output = {**found, "errors": [], "warnings": warnings}
        result_obj.success = bool(found["target"])
        if result_obj.success:
            result_obj.result = f"Tagged file: {found['target']}"
        elif not found["tag"]:
            result_obj.result = "No tag chosen"
        else:
            result_obj.result = f"No file chosen for tag '{found['tag']}'"

    return StageResult(
        announce=f"Searching tag '{tag}'..." if tag else "Searching tags...",
        progress_callback=do_work,
    )
