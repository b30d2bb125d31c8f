"""Diff rendering."""

from .render_diff import render_diff, render_segments

__all__ = ["render_diff", "render_segments"]
