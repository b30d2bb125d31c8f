"""Base class for process runners."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .ProcessResult import ProcessResult


class ProcessRunner(ABC):
    """Spawn a program, feed its stdin and collect its output."""

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        stdin: bytes,
        timeout: float,
        cancel_event: threading.Event | None = None,
    ) -> ProcessResult:
        """Run ``argv`` to completion.

        Args:
            argv: Program followed by its arguments
            stdin: Bytes written to the program's standard input
            timeout: Wall clock limit in seconds
            cancel_event: When set, the program is killed and the call aborts

        Returns:
            ProcessResult with exit code and captured streams

        Raises:
            ProcessSpawnError: If the program cannot be started
            ProcessTimeoutError: If the program exceeds ``timeout``
            ExecutionCancelled: If ``cancel_event`` is set before completion
        """
        pass
