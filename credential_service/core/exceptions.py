"""
Exceptions raised by the credential lifecycle.

User-facing errors carry a 4xx status and are reported to the caller with
their message. Operator-facing errors carry a 5xx status; their message and
details are only logged.

Version: 1.0
"""

from fastapi import status
from typing import Dict, List, Optional, Any

from credential_service.core.constants import (
    DUPLICATE_IDENTITY_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
)

class BaseAPIException(Exception):
    """Base exception class for API errors."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    @property
    def user_facing(self) -> bool:
        return self.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR

class ValidationException(BaseAPIException):
    """Raised when request input is malformed."""
    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(
            message="Request validation failed",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"errors": errors}
        )
        self.errors = errors

class DuplicateIdentity(BaseAPIException):
    """Raised when an identity already exists for the normalized email."""
    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=DUPLICATE_IDENTITY_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )

class InvalidCredentials(BaseAPIException):
    """
    Raised for an unknown email and for a wrong password alike.
    Both cases must stay indistinguishable to the caller.
    """
    def __init__(self):
        super().__init__(
            message=INVALID_CREDENTIALS_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST
        )

class StoreUnavailable(BaseAPIException):
    """Raised when the identity store cannot be reached or rejects an operation."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )

class SigningUnavailable(BaseAPIException):
    """Raised when a token cannot be signed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details
        )

class InvalidToken(BaseAPIException):
    """Raised when a token fails signature or expiry checks."""
    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED
        )

__all__ = [
    'BaseAPIException',
    'ValidationException',
    'DuplicateIdentity',
    'InvalidCredentials',
    'StoreUnavailable',
    'SigningUnavailable',
    'InvalidToken',
]
