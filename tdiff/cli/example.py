"""Example command - generate sample test cases."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich.text import Text

from ..api.cases.cmd_example import cmd_example
from ._handle_stage_result import _handle_stage_result
from .display.Display import Display


class Format(str, Enum):
    TOML = "toml"
    YAML = "yaml"


def _print_example(output: dict, display: Display) -> None:
    if not output.get("path") and output.get("content"):
        display.rich_output(Text(output["content"].rstrip("\n")))


def example_cmd(
    count: Annotated[int, typer.Argument(min=0, help="Number of test cases to generate")],
    path: Annotated[str | None, typer.Argument(help="Output file path (default: stdout)")] = None,
    fmt: Annotated[Format | None, typer.Option("--format", "-f", help="Output format (default: from suffix)")] = None,
) -> None:
    """Generate example test cases."""
    _handle_stage_result(cmd_example, result_printer=_print_example)(count, path, fmt.value if fmt else None)
