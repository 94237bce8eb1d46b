"""Custom exception classes."""
from typing import Optional


class ApiError(Exception):
    """Raised when the conference API returns an error or cannot be reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class AuthenticationError(Exception):
    """Raised when an action needs a signed-in attendee."""
    pass
