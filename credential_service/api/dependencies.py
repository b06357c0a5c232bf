"""
FastAPI dependencies wiring configuration into the credential components.

Version: 1.0
"""

from fastapi import Depends

from credential_service.config.settings import Settings, get_settings
from credential_service.core.constants import USERS_COLLECTION
from credential_service.core.security import TokenIssuer
from credential_service.db.mongodb import get_database
from credential_service.services.credential_store import CredentialStore

async def get_credential_store(
    db=Depends(get_database),
    settings: Settings = Depends(get_settings)
) -> CredentialStore:
    """Credential store bound to the users collection."""
    return CredentialStore(db[USERS_COLLECTION], rounds=settings.BCRYPT_ROUNDS)

def get_token_issuer(settings: Settings = Depends(get_settings)) -> TokenIssuer:
    """Token issuer configured from the signing settings."""
    return TokenIssuer(
        secret=settings.get_signing_secret(),
        algorithm=settings.JWT_ALGORITHM,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )

__all__ = ['get_credential_store', 'get_token_issuer']
