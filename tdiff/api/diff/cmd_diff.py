"""Diff command for interactive and batch modes."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Literal

from ...logging_config import get_logger
from .._output_schemas.diff import DiffOutput
from ..StageResult import StageResult
from .compute_diff import compute_diff

logger = get_logger("diff")


def _read_text(path: str) -> str:
    file_path = Path(path).expanduser()
    if not file_path.is_file():
        raise FileNotFoundError(f"Failed to read file: {path} (not found)")
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Failed to read file: {path} (not valid UTF-8)") from exc


def cmd_diff(left: str, right: str, mode: Literal["interactive", "batch"] = "interactive") -> StageResult:
    """Compare two literal strings, or the contents of two files.

    Args:
        left: Left string, or path in batch mode
        right: Right string, or path in batch mode
        mode: "interactive" compares the arguments, "batch" the files they name

    Returns:
        StageResult whose output follows DiffOutput
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if mode == "batch":
            yield (0.1, "Reading files")
            try:
                left_text = _read_text(left)
                right_text = _read_text(right)
            except (OSError, ValueError) as exc:
                logger.warning("batch read failed: %s", exc)
                result_obj.result = f"Diff failed: {exc}"
                result_obj.output = DiffOutput(errors=[str(exc)], mode=mode, left=left, right=right).model_dump(
                    mode="python"
                )
                result_obj.success = False
                yield (1.0, "Failed")
                return
        else:
            left_text, right_text = left, right

        yield (0.5, "Computing diff")
        diff = compute_diff(left_text, right_text)
        logger.debug("diff computed: %d ops, edit distance %d", len(diff.ops), diff.edit_distance)

        summary = diff.to_dict()
        result_obj.output = DiffOutput(
            errors=[],
            warnings=[],
            mode=mode,
            left=left,
            right=right,
            identical=summary["identical"],
            edit_distance=summary["edit_distance"],
            lcs_length=summary["lcs_length"],
            ops=summary["ops"],
        ).model_dump(mode="python")
        result_obj.result = "Inputs are identical" if diff.is_identical else f"Diff completed ({diff.edit_distance} changed)"
        result_obj.success = True
        yield (1.0, "Complete")

    subject = "files" if mode == "batch" else "inputs"
    return StageResult(
        announce=f"Diffing {subject} {left!r} vs {right!r}...",
        progress_callback=do_work,
    )
