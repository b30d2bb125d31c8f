"""Example command - generate sample test cases."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.cases import ExampleOutput
from ..StageResult import StageResult
from .CaseFileError import CaseFileError
from .CaseFormat import CaseFormat, format_for_path
from .dump_cases import dump_cases
from .generate_examples import generate_examples
from .save_cases import save_cases


def cmd_example(count: int, path: str | None = None, fmt: CaseFormat | None = None) -> StageResult:
    """Generate ``count`` example cases, written to ``path`` or returned as content.

    Args:
        count: Number of cases
        path: Output file; when omitted the serialized cases are only returned
        fmt: Serialization format; defaults to the file suffix, or TOML
    """
    target = Path(path).expanduser() if path else None
    resolved_fmt: CaseFormat = fmt or (format_for_path(target) if target else "toml")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Generating cases")
        try:
            cases = generate_examples(count)
        except ValueError as exc:
            result_obj.result = f"Example generation failed: {exc}"
            result_obj.output = ExampleOutput(errors=[str(exc)], count=count, format=resolved_fmt).model_dump(
                mode="python"
            )
            result_obj.success = False
            yield (1.0, "Failed")
            return

        yield (0.6, "Serializing cases")
        try:
            if target is not None:
                content = save_cases(target, cases, resolved_fmt)
            else:
                content = dump_cases(cases, resolved_fmt)
        except CaseFileError as exc:
            result_obj.result = f"Example generation failed: {exc.errors[0]}"
            result_obj.output = ExampleOutput(
                errors=exc.errors, count=count, format=resolved_fmt, path=str(target or "")
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Failed")
            return

        result_obj.output = ExampleOutput(
            errors=[],
            warnings=[],
            count=count,
            format=resolved_fmt,
            path=str(target) if target else "",
            content=content,
        ).model_dump(mode="python")
        result_obj.result = f"Wrote {count} example case(s) to {target}" if target else f"Generated {count} example case(s)"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Generating {count} example test case(s)...",
        progress_callback=do_work,
    )
