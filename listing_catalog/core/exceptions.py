"""Custom exception classes for the application.

This module defines application-specific exceptions that map
to appropriate HTTP status codes and error responses.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, status_code=404, details=details)


class DatabaseException(AppException):
    """Raised when a datastore read fails.

    The message is what the caller sees; the underlying driver error
    is logged but never copied into ``details``.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, status_code=500, details=details)
