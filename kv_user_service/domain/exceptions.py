"""
Custom exceptions for the user service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, Redis, etc.). Store-level failures
are translated into StoreError by the gateway layer.
"""

from typing import Any, Optional


class UserServiceException(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(UserServiceException):
    """Raised when a request body or user id cannot be parsed."""

    def __init__(self, field: str, value: Any, message: str):
        super().__init__(
            message=message,
            details={"field": field, "value": str(value)},
        )


class UserNotFoundError(UserServiceException):
    """Raised when no user record exists for the requested id."""

    def __init__(self, user_id: Optional[int] = None):
        super().__init__(message="no user found", details={"user_id": user_id})


class StoreError(UserServiceException):
    """Raised when the key-value store fails or holds an incompatible value."""

    def __init__(self, operation: str, key: Optional[str] = None, reason: Optional[str] = None):
        message = f"Store {operation} failed"
        if key:
            message += f" for key '{key}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            details={"operation": operation, "key": key, "reason": reason},
        )


class DecodingError(UserServiceException):
    """Raised when a stored hash cannot be mapped onto a User."""

    def __init__(self, key: str, reason: str):
        message = f"Cannot decode user stored at '{key}': {reason}"
        super().__init__(message=message, details={"key": key, "reason": reason})


class ParseError(UserServiceException):
    """Raised when an enumerated user key does not end in an integer id."""

    def __init__(self, key: str):
        message = f"Invalid user key: {key}"
        super().__init__(message=message, details={"key": key})
