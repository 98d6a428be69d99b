"""Navigation commands (registered on the top-level app)."""

import typer

from vaultnav.api.navigate.cmd_backlinks import cmd_backlinks
from vaultnav.api.navigate.cmd_open import cmd_open
from vaultnav.api.navigate.cmd_tags import cmd_tags
from vaultnav.cli._handle_stage_result import _handle_stage_result


def register_navigate(app: typer.Typer) -> None:
    """Add open, backlinks and tags to ``app``."""

    @app.command(name="open")
    def open_cmd(
        ctx: typer.Context,
        line: str = typer.Argument(..., help="Line of text holding the wikilink"),
        cursor: int = typer.Option(..., "--cursor", "-c", help="0-based cursor offset in the line"),
        wait: bool = typer.Option(False, "--wait", help="Block until audio playback ends"),
    ) -> None:
        """Follow the wikilink under the cursor: note, image or audio."""
        _handle_stage_result(cmd_open, ctx)(line, cursor, wait=wait)

    @app.command(name="backlinks")
    def backlinks_cmd(
        ctx: typer.Context,
        line: str = typer.Argument("", help="Line of text, optionally holding a wikilink"),
        cursor: int = typer.Option(0, "--cursor", "-c", help="0-based cursor offset in the line"),
        file: str = typer.Option("", "--file", "-f", help="Current file, used when no wikilink is under the cursor"),
    ) -> None:
        """Pick a file linking to the wikilink under the cursor, or to the current file."""
        _handle_stage_result(cmd_backlinks, ctx)(line, cursor, file)

    @app.command(name="tags")
    def tags_cmd(
        ctx: typer.Context,
        tag: str = typer.Argument("", help="Tag to search (pick from all tags if omitted)"),
    ) -> None:
        """Pick a tag, then a file carrying it."""
        _handle_stage_result(cmd_tags, ctx)(tag)
