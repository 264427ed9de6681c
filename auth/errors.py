"""
Auth error taxonomy.

Each error carries the HTTP status it maps to; the handlers in
``api.middleware`` render them as ``{"message": ...}`` bodies.
"""

from __future__ import annotations

from typing import Optional

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class DuplicateCredential(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered"


class InvalidCredential(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class UnexpectedFailure(AuthError):
    """Store or hashing failure. ``detail`` is only exposed in debug mode."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.detail = detail
