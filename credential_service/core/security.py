"""
Security primitives: password hashing context and token issuance.

Version: 1.0
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

from jose import jwt, ExpiredSignatureError, JOSEError, JWTError
from passlib.context import CryptContext

from credential_service.core.constants import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    BCRYPT_ROUNDS,
    DEFAULT_ALGORITHM,
)
from credential_service.core.exceptions import InvalidToken, SigningUnavailable
from credential_service.core.logging import SecurityLogger
from credential_service.models.user import UserIdentity

logger = logging.getLogger(__name__)
security_logger = SecurityLogger()

def create_password_context(rounds: int = BCRYPT_ROUNDS) -> CryptContext:
    """
    Build a bcrypt hashing context.

    Every hash call generates a fresh random salt; ``rounds`` is the bcrypt
    cost factor and applies to new hashes only.
    """
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__default_rounds=rounds,
    )

class TokenIssuer:
    """Builds signed, expiring bearer tokens bound to a user id."""

    def __init__(
        self,
        secret: Optional[str],
        algorithm: str = DEFAULT_ALGORITHM,
        expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, user: UserIdentity) -> str:
        """
        Create a signed token for ``user``.

        Args:
            user: Identity returned by a successful registration or login

        Returns:
            str: Encoded JWT carrying only the user id

        Raises:
            SigningUnavailable: If the secret is unconfigured or signing fails
        """
        if not self._secret:
            raise SigningUnavailable("Signing secret is not configured")

        issued_at = datetime.now(timezone.utc)
        expire = issued_at + self.expires_delta
        claims = {
            "user": {"id": user.id},
            "iat": issued_at,
            "exp": expire,
        }

        try:
            token = jwt.encode(claims, self._secret, algorithm=self.algorithm)
        except JOSEError as e:
            raise SigningUnavailable(
                "Token signing failed",
                details={"algorithm": self.algorithm, "error": str(e)}
            ) from e

        security_logger.log_security_event(
            "access_token_created",
            {"user_id": user.id, "expires": expire.isoformat()}
        )
        return token

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Decode ``token`` and check its signature and expiry.

        Raises:
            InvalidToken: If the token is expired, tampered or unsigned
            SigningUnavailable: If the secret is unconfigured
        """
        if not self._secret:
            raise SigningUnavailable("Signing secret is not configured")

        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except JWTError:
            raise InvalidToken()

__all__ = ['create_password_context', 'TokenIssuer']
