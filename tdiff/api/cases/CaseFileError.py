"""Test-case file error."""


class CaseFileError(Exception):
    """Raised when a test-case file cannot be read, parsed or validated."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Test-case file is invalid:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
