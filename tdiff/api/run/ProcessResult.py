"""Process result dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and raw streams of a finished child process."""

    exit_code: int
    stdout: bytes = b""
    stderr: bytes = b""
