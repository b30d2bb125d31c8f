"""Map diff segments to styled rich text."""

from collections.abc import Iterable
from typing import Any

from rich.text import Text

from ..config.DisplayConfig import DisplayConfig
from ..diff.DiffResult import DiffResult
from ..diff.OpKind import OpKind


def _style_for(kind: OpKind, config: DisplayConfig) -> str:
    if kind is OpKind.DELETE:
        return config.delete_style
    if kind is OpKind.INSERT:
        return config.insert_style
    return config.equal_style


def render_segments(segments: Iterable[tuple[OpKind | str, Any]], config: DisplayConfig | None = None) -> Text:
    """Render (kind, text) pairs; kinds may be OpKind members or their values."""
    config = config or DisplayConfig()
    text = Text(no_wrap=False, end="")
    for kind, elements in segments:
        chunk = elements if isinstance(elements, str) else "".join(str(e) for e in elements)
        style = _style_for(OpKind(kind), config)
        text.append(chunk, style=style or None)
    return text


def render_diff(result: DiffResult, config: DisplayConfig | None = None) -> Text:
    """Render a DiffResult with one style per op kind."""
    return render_segments(result.segments(), config)
