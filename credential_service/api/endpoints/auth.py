"""
Login endpoint.

Version: 1.0
"""

from fastapi import APIRouter, Depends

from credential_service.api.dependencies import get_credential_store, get_token_issuer
from credential_service.core.constants import LOGIN_SUCCESS_MESSAGE
from credential_service.core.security import TokenIssuer
from credential_service.schemas.auth import ErrorResponse, LoginRequest, TokenResponse
from credential_service.services.credential_store import CredentialStore

router = APIRouter(tags=["Authentication"])

@router.post(
    "/auth",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}}
)
async def login(
    credentials: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer)
) -> TokenResponse:
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords both fail with the same
    "Invalid credentials" error.
    """
    user = await store.authenticate(credentials.email, credentials.password)

    return TokenResponse(msg=LOGIN_SUCCESS_MESSAGE, token=issuer.issue(user))

__all__ = ["router"]
