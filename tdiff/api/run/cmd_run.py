"""Run command - program mode of get."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from .._output_schemas.run import RunOutput
from ..cases.CaseFileError import CaseFileError
from ..cases.load_cases import load_cases
from ..config.TdiffConfig import TdiffConfig
from ..StageResult import StageResult
from .ProcessRunner import ProcessRunner
from .run_tests import run_tests
from .TestOutcome import TestOutcome

logger = get_logger("run")


def cmd_run(
    program: str,
    cases_file: str,
    timeout: float | None = None,
    max_workers: int | None = None,
    runner: ProcessRunner | None = None,
) -> StageResult:
    """Run ``program`` against every case in ``cases_file``.

    Args:
        program: Path to the executable under test
        cases_file: TOML or YAML test-case file
        timeout: Per-case timeout override (seconds)
        max_workers: Concurrency override
        runner: Process runner override (tests use a fake)

    Returns:
        StageResult whose output follows RunOutput; success only if all cases pass
    """

    def fail(result_obj: StageResult, errors: list[str], program_path: str) -> None:
        result_obj.result = f"Run failed: {errors[0]}"
        result_obj.output = RunOutput(errors=errors, program=program_path, cases_file=cases_file).model_dump(
            mode="python"
        )
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration")
        try:
            config = TdiffConfig.load()
        except ValueError as exc:
            fail(result_obj, [str(exc)], program)
            yield (1.0, "Failed")
            return

        program_path = Path(program).expanduser()
        if not program_path.is_file():
            fail(result_obj, [f"program not found: {program}"], program)
            yield (1.0, "Failed")
            return
        program_path = program_path.resolve()

        yield (0.1, "Loading test cases")
        try:
            cases = load_cases(Path(cases_file).expanduser())
        except CaseFileError as exc:
            fail(result_obj, exc.errors, str(program_path))
            yield (1.0, "Failed")
            return

        effective_timeout = timeout if timeout is not None else config.run.timeout_seconds
        effective_workers = max_workers if max_workers is not None else config.run.max_workers
        if effective_timeout <= 0 or effective_workers < 1:
            fail(result_obj, ["timeout must be positive and jobs at least 1"], str(program_path))
            yield (1.0, "Failed")
            return

        logger.info("running %s over %d case(s)", program_path, len(cases))
        yield (0.2, f"Running {len(cases)} case(s)")
        outcomes: list[TestOutcome] = run_tests(
            program_path,
            cases,
            runner=runner,
            timeout=effective_timeout,
            max_workers=effective_workers,
        )

        passed = sum(1 for outcome in outcomes if outcome.passed)
        failed = len(outcomes) - passed
        warnings = [
            f"case {outcome.case_index}: {outcome.error.kind.value}: {outcome.error.message}"
            for outcome in outcomes
            if outcome.error is not None
        ]

        result_obj.output = RunOutput(
            errors=[],
            warnings=warnings,
            program=str(program_path),
            cases_file=cases_file,
            total=len(cases),
            passed=passed,
            failed=failed,
            outcomes=[outcome.to_dict() for outcome in outcomes],
        ).model_dump(mode="python")
        result_obj.result = f"{passed}/{len(outcomes)} case(s) passed"
        result_obj.success = failed == 0
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Testing {program} with {cases_file}...",
        progress_callback=do_work,
    )
