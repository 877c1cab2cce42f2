"""Failure kinds raised by services and mapped to HTTP responses in main."""

from typing import Any


class BlogAPIError(Exception):
    """Base class for failures reported to API clients."""

    status_code = 500
    default_message = "An error occurred"

    def __init__(self, message: str | None = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationFailed(BlogAPIError):
    """Malformed or missing input."""

    status_code = 422
    default_message = "Validation failed"


class Conflict(BlogAPIError):
    """A unique constraint would be violated."""

    status_code = 409
    default_message = "Conflict"


class EmailTaken(Conflict):
    default_message = "Email already exists"


class Unauthorized(BlogAPIError):
    """Missing, invalid or revoked credentials.

    The message never says whether the underlying account exists.
    """

    status_code = 401
    default_message = "Unauthorized"


class InvalidCredentials(Unauthorized):
    pass


class InvalidToken(Unauthorized):
    default_message = "Not authenticated"


class NotFound(BlogAPIError):
    status_code = 404
    default_message = "Not found"


class StorageError(BlogAPIError):
    """Unexpected failure of the persistent store."""
