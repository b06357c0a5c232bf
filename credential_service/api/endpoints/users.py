"""
User registration endpoint.

Version: 1.0
"""

from fastapi import APIRouter, Depends
import logging

from credential_service.api.dependencies import get_credential_store, get_token_issuer
from credential_service.core.constants import REGISTER_SUCCESS_MESSAGE
from credential_service.core.security import TokenIssuer
from credential_service.schemas.auth import ErrorResponse, RegisterRequest, TokenResponse
from credential_service.services.credential_store import CredentialStore

# Configure module logger
logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])

@router.post(
    "/users",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}}
)
async def register(
    user_data: RegisterRequest,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer)
) -> TokenResponse:
    """
    Register a user and return a signed token for it.

    Raises:
        DuplicateIdentity: If the email is already registered (400)
        StoreUnavailable: If the store fails (500)
        SigningUnavailable: If the token cannot be signed (500)
    """
    user = await store.register(user_data.name, user_data.email, user_data.password)
    logger.info(f"Registered user {user.id}")

    return TokenResponse(msg=REGISTER_SUCCESS_MESSAGE, token=issuer.issue(user))

__all__ = ["router"]
