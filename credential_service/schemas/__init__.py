"""
Request and response schemas.

Version: 1.0
"""

from credential_service.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "ErrorDetail",
    "ErrorResponse",
]
