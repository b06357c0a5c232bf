"""
Middleware package for the credential service.

Version: 1.0
"""

from credential_service.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from credential_service.middleware.logging_middleware import logging_middleware

__all__ = [
    'ErrorHandlerMiddleware',
    'register_exception_handlers',
    'logging_middleware',
]
