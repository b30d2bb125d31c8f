"""Unit test fixtures.

Provides a fake process runner so harness tests never spawn real processes.
"""

import threading
from collections.abc import Callable, Sequence

import pytest

from tdiff.api.run.ProcessResult import ProcessResult
from tdiff.api.run.ProcessRunner import ProcessRunner
from tests.conftest import run_cmd

__all__ = ["FakeRunner", "ok", "run_cmd"]


def ok(text: str) -> ProcessResult:
    """A successful run printing ``text``."""
    return ProcessResult(exit_code=0, stdout=text.encode("utf-8"))


Behavior = ProcessResult | BaseException | Callable[..., ProcessResult]


class FakeRunner(ProcessRunner):
    """Runner that answers from a table keyed by the stdin text.

    A behavior is a ProcessResult to return, an exception to raise, or a
    callable invoked with ``(argv, stdin, timeout, cancel_event)``.
    """

    def __init__(self, behaviors: dict[str, Behavior]):
        self.behaviors = behaviors
        self.calls: list[tuple[list[str], str, float]] = []
        self._lock = threading.Lock()

    def run(
        self,
        argv: Sequence[str],
        stdin: bytes,
        timeout: float,
        cancel_event: threading.Event | None = None,
    ) -> ProcessResult:
        key = stdin.decode("utf-8")
        with self._lock:
            self.calls.append((list(argv), key, timeout))
        behavior = self.behaviors[key]
        if isinstance(behavior, BaseException):
            raise behavior
        if callable(behavior):
            return behavior(argv, stdin, timeout, cancel_event)
        return behavior


@pytest.fixture
def fake_runner_factory():
    return FakeRunner
