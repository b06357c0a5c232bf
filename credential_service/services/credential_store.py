"""
Credential store: identity records, email uniqueness and password hashing.

Version: 1.0
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from passlib.context import CryptContext
from passlib.exc import NullPasswordError, PasswordValueError
from pymongo.errors import DuplicateKeyError, PyMongoError

from credential_service.core.constants import (
    BCRYPT_ROUNDS,
    PASSWORD_NULL_MESSAGE,
    PASSWORD_TOO_LONG_MESSAGE,
)
from credential_service.core.exceptions import (
    DuplicateIdentity,
    InvalidCredentials,
    StoreUnavailable,
    ValidationException,
)
from credential_service.core.logging import SecurityLogger
from credential_service.core.security import create_password_context
from credential_service.models.user import UserIdentity, UserRecord, normalize_email

# Configure module logger
logger = logging.getLogger(__name__)
security_logger = SecurityLogger()

class CredentialStore:
    """Owns the users collection. The only component that sees password hashes."""

    def __init__(self, collection, rounds: int = BCRYPT_ROUNDS, pwd_context: Optional[CryptContext] = None):
        self.collection = collection
        self.pwd_context = pwd_context or create_password_context(rounds)

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a record by normalized email."""
        try:
            document = await self.collection.find_one({"email": normalize_email(email)})
        except PyMongoError as e:
            raise StoreUnavailable("User lookup failed", details={"error": str(e)}) from e

        if document is None:
            return None
        return UserRecord.from_document(document)

    async def register(self, name: str, email: str, password: str) -> UserIdentity:
        """
        Create a new identity.

        Args:
            name: Display name, already validated as non-empty
            email: Email address, lowercased before lookup and storage
            password: Plaintext password, hashed before it is persisted

        Returns:
            UserIdentity: The created identity, without its hash

        Raises:
            DuplicateIdentity: If the normalized email is already registered
            StoreUnavailable: If the store fails
            ValidationException: If the hashing backend refuses the password
        """
        email = normalize_email(email)

        # Reject duplicates before paying for a hash
        if await self.find_by_email(email) is not None:
            security_logger.log_security_event(
                "duplicate_registration", {"email": email}
            )
            raise DuplicateIdentity()

        try:
            password_hash = await asyncio.to_thread(self.pwd_context.hash, password)
        except PasswordValueError as e:
            message = PASSWORD_NULL_MESSAGE if isinstance(e, NullPasswordError) else PASSWORD_TOO_LONG_MESSAGE
            raise ValidationException(
                [{"msg": message, "param": "password", "location": "body"}]
            ) from e

        document = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": datetime.now(timezone.utc),
        }

        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError:
            # A concurrent registration won the unique index
            security_logger.log_security_event(
                "duplicate_registration", {"email": email, "detected_by": "unique_index"}
            )
            raise DuplicateIdentity(details={"detected_by": "unique_index"})
        except PyMongoError as e:
            raise StoreUnavailable("User insert failed", details={"error": str(e)}) from e

        user = UserIdentity(id=str(result.inserted_id), name=name, email=email)
        security_logger.log_security_event(
            "user_registered", {"user_id": user.id, "email": email}
        )
        return user

    async def authenticate(self, email: str, password: str) -> UserIdentity:
        """
        Check a password against the stored hash.

        Raises:
            InvalidCredentials: For an unknown email or a wrong password
            StoreUnavailable: If the store fails
        """
        email = normalize_email(email)
        record = await self.find_by_email(email)

        if record is None:
            # Spend the same hashing time as a real check
            await asyncio.to_thread(self.pwd_context.dummy_verify)
            security_logger.log_security_event(
                "failed_login_attempt", {"email": email, "reason": "user_not_found"}
            )
            raise InvalidCredentials()

        try:
            matches = await asyncio.to_thread(self.pwd_context.verify, password, record.password_hash)
        except PasswordValueError:
            # A password bcrypt cannot hash never matches a stored hash
            matches = False

        if not matches:
            security_logger.log_security_event(
                "failed_login_attempt", {"user_id": record.id, "reason": "invalid_password"}
            )
            raise InvalidCredentials()

        security_logger.log_security_event("login_success", {"user_id": record.id})
        return record.to_identity()

__all__ = ['CredentialStore']
