"""Typed application errors.

Every error carries a stable ``code`` and the HTTP status the API layer
maps it to. Services raise these; the handlers in
``catalog.api.errors`` turn them into the JSON error envelope.
"""

from typing import Any


class AppError(Exception):
    """Base class for all operational errors."""

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(AppError):
    """A referenced entity does not exist."""

    status_code = 404
    code = "RESOURCE_NOT_FOUND"


class ValidationError(AppError):
    """Input violates a uniqueness or ownership rule."""

    status_code = 422
    code = "VALIDATION_ERROR"


class UnauthorizedError(AppError):
    """Authentication is missing or invalid."""

    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Authentication required", details: Any = None):
        super().__init__(message, details)


class ForbiddenError(AppError):
    """Authenticated user lacks the required role."""

    status_code = 403
    code = "FORBIDDEN"

    def __init__(self, message: str = "Insufficient permissions", details: Any = None):
        super().__init__(message, details)


class RateLimitError(AppError):
    """Client exceeded the request budget for the current window."""

    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"

    def __init__(self, retry_after: int):
        super().__init__("Too many requests from this IP, please try again later.")
        self.retry_after = retry_after
