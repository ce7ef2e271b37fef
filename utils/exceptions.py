"""
Exceptions raised by the exercise tracker.

Every error carries the message sent back to the client and the HTTP
status code it maps to. The API layer renders them as ``{"error": message}``.
"""

from typing import Any, Dict


class ExerciseTrackerError(Exception):
    """
    Base exception for all exercise tracker errors.

    Attributes:
        message: Human-readable error message returned to the client
        status_code: HTTP status code for API responses
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {"error": self.message}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, message={self.message!r})"


class ValidationError(ExerciseTrackerError):
    """Raised when a request field is missing or malformed."""

    status_code = 400


class NotFoundError(ExerciseTrackerError):
    """Raised when a referenced record does not exist.

    Reported as 400 rather than 404, matching the rest of the API.
    """

    status_code = 400


class StoreError(ExerciseTrackerError):
    """Raised when the document store rejects an operation.

    Covers malformed identifiers, schema violations on insert and driver
    failures.
    """

    status_code = 500
