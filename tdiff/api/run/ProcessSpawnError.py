"""Process launch failure."""


class ProcessSpawnError(RuntimeError):
    """Raised when the target cannot be started."""
