"""Vault commands (registered on the top-level app)."""

import typer

from vaultnav.api.vault.cmd_daily import cmd_daily
from vaultnav.api.vault.cmd_template import cmd_template
from vaultnav.cli._handle_stage_result import _handle_stage_result


def register_vault(app: typer.Typer) -> None:
    """Add daily and template to ``app``."""

    @app.command(name="daily")
    def daily_cmd(
        ctx: typer.Context,
        offset: int = typer.Option(0, "--offset", "-o", help="Days from the date (-1 yesterday, 1 tomorrow)"),
        date: str = typer.Option("", "--date", help="Base date YYYY-MM-DD (default: today)"),
    ) -> None:
        """Show the daily note path for a date."""
        _handle_stage_result(cmd_daily, ctx)(offset, date)

    @app.command(name="template")
    def template_cmd(
        ctx: typer.Context,
        note: str = typer.Argument(..., help="Note to apply the template to"),
        replace_frontmatter: bool = typer.Option(
            False, "--replace-frontmatter", help="Drop the note's existing frontmatter first"
        ),
    ) -> None:
        """Prepend the vault's YAML template to a note."""
        _handle_stage_result(cmd_template, ctx)(note, replace_frontmatter=replace_frontmatter)
