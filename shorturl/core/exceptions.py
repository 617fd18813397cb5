"""
Custom Exceptions

This module defines custom exceptions for better error handling
and more specific error messages.

Storage failures are never dropped: the gateway raises one of these and
the endpoint layer decides which HTTP status it becomes.
"""


class URLShortenerException(Exception):
    """Base exception for URL shortener service."""
    pass


class InvalidURLError(URLShortenerException):
    """Raised when URL validation fails."""

    def __init__(self, url: str, reason: str = "Not a valid URL"):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class ShortLinkNotFoundError(URLShortenerException):
    """Raised when a short id is not found in the database."""

    def __init__(self, short_id: str):
        self.short_id = short_id
        super().__init__(f"Short id '{short_id}' not found")


class DatabaseError(URLShortenerException):
    """Raised when database operations fail."""

    def __init__(self, message: str, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")


class DuplicateShortIdError(DatabaseError):
    """Raised when an insert collides with an existing short id."""

    def __init__(self, short_id: str, original_error: Exception = None):
        self.short_id = short_id
        super().__init__(
            f"short id '{short_id}' already exists",
            original_error=original_error
        )


class ShortIdExhaustedError(DatabaseError):
    """Raised when every generated short id collided."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"no free short id after {attempts} attempt(s)")
