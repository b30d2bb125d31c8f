"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ...constants import DEFAULT_TIMESTAMP_FORMAT
from .Display import Display


class CLIDisplay(Display):
    """CLI display: messages on stderr, results on stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout, highlight=False)
        self.stderr_console = Console(file=sys.stderr, highlight=False)

    def _timestamp(self) -> str:
        return datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(str(details))}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        sys.stdout.write(text)
        sys.stdout.flush()

    def rich_output(self, text: Text | str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(text, markup=False, emoji=False, soft_wrap=True)
