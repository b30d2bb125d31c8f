"""Run cancellation."""


class ExecutionCancelled(RuntimeError):
    """Raised when a running process is killed because the run was aborted."""
