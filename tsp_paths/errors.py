from typing import Optional


class PathInputError(ValueError):
    """Raised when a point or line handed to a path builder is malformed."""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"item {index}: {message}"
        super().__init__(message)
        self.index = index


class EmptyRingError(LookupError):
    """Raised when a candidate is requested from an exhausted ring."""
