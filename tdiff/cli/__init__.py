"""CLI - main entry point."""

import sys
from itertools import takewhile

COMMANDS = ("get", "example")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    root_args = list(takewhile(lambda arg: arg not in COMMANDS and arg != "--", argv))
    if "--version" in root_args or "-v" in root_args:
        from ..api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"tdiff {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        # non-standalone click returns the code of a raised Exit
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        typer.echo("Aborted.", err=True)
        return 1
