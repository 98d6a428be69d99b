"""Vault template API command.

CLI: vaultnav template NOTE [--replace-frontmatter]
"""

from collections.abc import Iterator
from pathlib import Path

from ...constants import TEMPLATE_FILE_NAME
from ...utils.normalize_path import normalize_path
from ..StageResult import StageResult


def cmd_template(note: str, replace_frontmatter: bool = False) -> StageResult:
    """Prepend the vault's YAML template to a note and write it back.

    Args:
        note: Path of the note (created if missing)
        replace_frontmatter: Drop the note's existing frontmatter first
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.NavConfig import NavConfig
        from .apply_template import apply_template

        note_path = normalize_path(note)
        output = {
            "errors": [],
            "warnings": [],
            "note": str(note_path),
            "template": "",
            "title": note_path.stem,
            "written": False,
        }

        yield (0.1, "Loading configuration...")
        try:
            config = NavConfig.load()
        except ValueError as e:
            output["errors"].append(str(e))
            result_obj.output = output
            result_obj.result = f"Template failed: {e}"
            result_obj.success = False
            return

        if not config.vault.template_dir:
            output["errors"].append("vault.template_dir is not configured")
            result_obj.output = output
            result_obj.result = "Template failed: no template directory"
            result_obj.success = False
            return

        template_path = Path(config.vault.template_dir) / TEMPLATE_FILE_NAME
        output["template"] = str(template_path)

        yield (0.3, "Reading template...")
        try:
            template = template_path.read_text(encoding="utf-8")
            content = note_path.read_text(encoding="utf-8") if note_path.exists() else ""
        except OSError as e:
            output["errors"].append(f"Could not open file: {e}")
            result_obj.output = output
            result_obj.result = f"Template failed: {e}"
            result_obj.success = False
            return

        yield (0.7, "Writing note...")
        try:
            note_path.parent.mkdir(parents=True, exist_ok=True)
            note_path.write_text(
                apply_template(template, content, note_path.stem, replace_frontmatter=replace_frontmatter),
                encoding="utf-8",
            )
        except OSError as e:
            output["errors"].append(f"Could not write note: {e}")
            result_obj.output = output
            result_obj.result = f"Template failed: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        output["written"] = True
        result_obj.output = output
        result_obj.result = f"Applied template to {note_path}"
        result_obj.success = True

    return StageResult(
        announce=f"Applying template to {note}...",
        progress_callback=do_work,
    )
