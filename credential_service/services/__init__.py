"""
Service layer for the credential service.

Version: 1.0
"""

from credential_service.services.credential_store import CredentialStore

__all__ = ["CredentialStore"]
