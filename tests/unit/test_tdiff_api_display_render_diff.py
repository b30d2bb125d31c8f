"""Unit tests for tdiff.api.display.render_diff."""

import pytest

from tdiff.api.config import DisplayConfig
from tdiff.api.diff import OpKind, compute_diff
from tdiff.api.display import render_diff, render_segments

pytestmark = pytest.mark.unit


def styled(text):
    return [(text.plain[span.start : span.end], str(span.style)) for span in text.spans]


class TestRenderDiff:
    def test_plain_text_is_concatenation(self):
        text = render_diff(compute_diff("hello", "world"))
        assert text.plain == "hellworld"

    def test_default_styles(self):
        text = render_diff(compute_diff("hello", "world"))
        assert styled(text) == [("hell", "on red"), ("w", "on cyan"), ("rld", "on cyan")]

    def test_equal_style_applied_when_configured(self):
        config = DisplayConfig(delete_style="strike", insert_style="bold", equal_style="dim")
        text = render_diff(compute_diff("ab", "ac"), config)
        assert styled(text) == [("a", "dim"), ("b", "strike"), ("c", "bold")]

    def test_segments_accept_kind_values(self):
        text = render_segments([("equal", "x"), ("insert", "y"), (OpKind.DELETE, "z")])
        assert text.plain == "xyz"
        assert styled(text) == [("y", "on cyan"), ("z", "on red")]

    def test_identical_has_no_spans(self):
        text = render_diff(compute_diff("same", "same"))
        assert text.plain == "same"
        assert text.spans == []
