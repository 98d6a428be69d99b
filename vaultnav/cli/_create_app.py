"""Create the main Typer CLI app."""

import typer

from vaultnav.cli._configure_cli_logging import _configure_cli_logging
from vaultnav.cli.config import config
from vaultnav.cli.navigate import register_navigate
from vaultnav.cli.vault import register_vault


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Vault navigation: follow wikilinks, backlinks and tags",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    # Navigation and vault commands live at the top level
    register_navigate(app)
    register_vault(app)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        # Validate display format
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        if ctx.obj is None:
            ctx.obj = {}
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _configure_cli_logging()

    return app
