"""Get command - diff two inputs or test a program."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich.text import Text

from ..api.config.DisplayConfig import DisplayConfig
from ..api.config.TdiffConfig import TdiffConfig
from ..api.diff.cmd_diff import cmd_diff
from ..api.display.render_diff import render_segments
from ..api.run.cmd_run import cmd_run
from ._handle_stage_result import _handle_stage_result
from .display.Display import Display


class Mode(str, Enum):
    """Compare mode."""

    PROGRAM = "program"
    INTERACTIVE = "interactive"
    BATCH = "batch"


def _display_config() -> DisplayConfig:
    try:
        return TdiffConfig.load().display
    except ValueError:
        return DisplayConfig()


def _render_ops(ops: list[dict], config: DisplayConfig) -> Text:
    return render_segments(((op["kind"], op["text"]) for op in ops), config)


def _print_diff(output: dict, display: Display) -> None:
    if output.get("errors"):
        return
    display.rich_output(_render_ops(output.get("ops", []), _display_config()))


def _print_run(output: dict, display: Display) -> None:
    config = _display_config()
    for outcome in output.get("outcomes", []):
        label = outcome.get("note") or "test"
        verdict = "PASS" if outcome["passed"] else "FAIL"
        display.rich_output(Text(f"{label} [{outcome['case_index']}]: {verdict}", style="bold"))
        error = outcome.get("error")
        if error:
            display.rich_output(Text(f"{error['kind']}: {error['message']}", style="yellow"))
        diff = outcome.get("diff")
        if diff:
            display.rich_output(_render_ops(diff["ops"], config))


def get_cmd(
    left: Annotated[str, typer.Argument(help="Left input (string, file, or program path)")],
    right: Annotated[str, typer.Argument(help="Right input (string, file, or test-case file)")],
    mode: Annotated[Mode, typer.Option("--mode", "-m", help="Compare mode")] = Mode.INTERACTIVE,
    timeout: Annotated[
        float | None, typer.Option("--timeout", "-t", help="Per-case timeout in seconds (program mode)")
    ] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", help="Concurrent cases (program mode)")] = None,
) -> None:
    """Get the diff between two inputs."""
    if mode is Mode.PROGRAM:
        _handle_stage_result(cmd_run, result_printer=_print_run)(left, right, timeout, jobs)
    else:
        _handle_stage_result(cmd_diff, result_printer=_print_diff)(left, right, mode.value)
