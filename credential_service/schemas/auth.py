"""
Request and response schemas for registration and login.

Every field is checked and every failure is reported, each with its own
human-readable message.

Version: 1.0
"""

# External imports with version specifications
from pydantic import BaseModel, Field, field_validator  # v2
from pydantic_core import PydanticCustomError
from email_validator import EmailNotValidError, validate_email
from passlib.utils import MAX_PASSWORD_SIZE
from typing import Any, List, Optional

from credential_service.core.constants import (
    PASSWORD_NULL_MESSAGE,
    PASSWORD_TOO_LONG_MESSAGE,
)

MIN_PASSWORD_LENGTH = 6

def _check_email(value: Any, message: str) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("email_invalid", message)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_invalid", message)
    return value

class RegisterRequest(BaseModel):
    """
    Schema for registration requests.
    """
    name: str = Field(
        default=None,
        validate_default=True,
        description="Display name",
        examples=["Ann"]
    )
    email: str = Field(
        default=None,
        validate_default=True,
        description="Email address; compared case-insensitively",
        examples=["ann@example.com"]
    )
    password: str = Field(
        default=None,
        validate_default=True,
        description=f"Password with at least {MIN_PASSWORD_LENGTH} characters",
        examples=["secret1"]
    )

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        if not isinstance(value, str) or not value:
            raise PydanticCustomError("name_required", "Please enter your name")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_address(cls, value: Any) -> str:
        return _check_email(value, "Please enter a valid email")

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value: Any) -> str:
        if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Please enter a password with 6 or more characters"
            )
        # bcrypt refuses NUL bytes and passlib caps the secret size
        if "\x00" in value:
            raise PydanticCustomError("password_null", PASSWORD_NULL_MESSAGE)
        if len(value.encode("utf-8")) > MAX_PASSWORD_SIZE:
            raise PydanticCustomError("password_too_long", PASSWORD_TOO_LONG_MESSAGE)
        return value

class LoginRequest(BaseModel):
    """
    Schema for login requests.
    """
    email: str = Field(
        default=None,
        validate_default=True,
        examples=["ann@example.com"]
    )
    password: str = Field(
        default=None,
        validate_default=True,
        examples=["secret1"]
    )

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_address(cls, value: Any) -> str:
        return _check_email(value, "Please include a valid email")

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise PydanticCustomError("password_required", "Password is required")
        return value

class TokenResponse(BaseModel):
    """Successful registration or login."""
    msg: str = Field(..., examples=["User logged in successfully"])
    token: str = Field(..., description="Signed bearer token", examples=["eyJhbGciOiJIUzI1NiIs..."])

class ErrorDetail(BaseModel):
    msg: str
    param: Optional[str] = None
    location: Optional[str] = None

class ErrorResponse(BaseModel):
    """User-facing error list."""
    errors: List[ErrorDetail]

__all__ = [
    'MIN_PASSWORD_LENGTH',
    'RegisterRequest',
    'LoginRequest',
    'TokenResponse',
    'ErrorDetail',
    'ErrorResponse',
]
