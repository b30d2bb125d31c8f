"""Run module - test harness for program mode."""

from .ExecutionCancelled import ExecutionCancelled
from .ProcessResult import ProcessResult
from .ProcessRunner import ProcessRunner
from .ProcessSpawnError import ProcessSpawnError
from .ProcessTimeoutError import ProcessTimeoutError
from .run_tests import run_case, run_tests
from .RunError import RunError
from .RunErrorKind import RunErrorKind
from .SubprocessRunner import SubprocessRunner
from .TestCase import TestCase
from .TestOutcome import TestOutcome

__all__ = [
    "ExecutionCancelled",
    "ProcessResult",
    "ProcessRunner",
    "ProcessSpawnError",
    "ProcessTimeoutError",
    "RunError",
    "RunErrorKind",
    "SubprocessRunner",
    "TestCase",
    "TestOutcome",
    "run_case",
    "run_tests",
]
