"""Create the main Typer CLI app."""

import logging

import typer

from ..api.config.TdiffConfig import TdiffConfig
from ..logging_config import setup_logging
from ._handle_stage_result import DISPLAY_FORMATS
from .example import example_cmd
from .get import get_cmd


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Character diffs of strings, files, and program output",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="get")(get_cmd)
    app.command(name="example")(example_cmd)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        try:
            level = TdiffConfig.load().log.level
        except ValueError:
            level = "WARNING"
        setup_logging(getattr(logging, level))

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
