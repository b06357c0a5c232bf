"""
API package for the credential service.

Version: 1.0
"""

from credential_service.api.router import api_router

__all__ = ["api_router"]
