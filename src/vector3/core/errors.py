__all__ = ["Vector3Error", "LengthMismatch"]


class Vector3Error(Exception):
    """Base class for all errors raised by this package."""


class LengthMismatch(Vector3Error, ValueError):
    """Raised when a byte buffer does not hold exactly one encoded vector."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Expected {expected} bytes, got {actual}")
        self.expected: int = expected
        self.actual: int = actual
