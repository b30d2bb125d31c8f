"""Process runner backed by subprocess."""

import os
import signal
import subprocess
import threading
import time
from collections.abc import Sequence

from .ExecutionCancelled import ExecutionCancelled
from .ProcessResult import ProcessResult
from .ProcessRunner import ProcessRunner
from .ProcessSpawnError import ProcessSpawnError
from .ProcessTimeoutError import ProcessTimeoutError


class SubprocessRunner(ProcessRunner):
    """Run programs with ``subprocess.Popen``.

    Output is collected with ``communicate`` in short slices so that a cancel
    request is noticed while the child is still running.
    """

    def __init__(self, poll_interval: float = 0.1):
        self.poll_interval = poll_interval

    def run(
        self,
        argv: Sequence[str],
        stdin: bytes,
        timeout: float,
        cancel_event: threading.Event | None = None,
    ) -> ProcessResult:
        try:
            process = subprocess.Popen(
                list(argv),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=True,
            )
        except (OSError, ValueError) as exc:
            raise ProcessSpawnError(f"Failed to spawn {argv[0]}: {exc}") from exc

        deadline = time.monotonic() + timeout
        pending: bytes | None = stdin
        while True:
            if cancel_event is not None and cancel_event.is_set():
                self._kill(process)
                raise ExecutionCancelled(f"{argv[0]} was cancelled")

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                self._kill(process)
                raise ProcessTimeoutError(timeout)

            try:
                stdout, stderr = process.communicate(pending, timeout=min(remaining, self.poll_interval))
                break
            except subprocess.TimeoutExpired:
                # input already handed to communicate, it resumes writing on retry
                pending = None

        return ProcessResult(exit_code=process.returncode, stdout=stdout or b"", stderr=stderr or b"")

    def _kill(self, process: subprocess.Popen) -> None:
        """Kill the child and its process group, then reap it, discarding partial output.

        The pipes are closed rather than drained: a grandchild that survives
        the kill may still hold their write ends.
        """
        if os.name == "posix":
            try:
                os.killpg(process.pid, signal.SIGKILL)
            except ProcessLookupError:
                pass
        else:
            process.kill()
        for stream in (process.stdin, process.stdout, process.stderr):
            if stream is not None:
                stream.close()
        process.wait()
