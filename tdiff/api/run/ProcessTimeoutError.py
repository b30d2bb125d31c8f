"""Process timeout."""


class ProcessTimeoutError(RuntimeError):
    """Raised when the target does not finish within its time limit."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Process timed out after {timeout:g}s")
