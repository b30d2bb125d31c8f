"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from .display.CLIDisplay import CLIDisplay
from .display.Display import Display
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context chain.

    Falls back to "text" when no context carries the flag.
    """
    import click

    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return "text"


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict, Display], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout: rendered text, JSON or YAML per --display)

    The wrapper exits with 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(), result_printer)

    return wrapper  # type: ignore[return-value]
