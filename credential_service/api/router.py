"""
FastAPI API router configuration module.

Version: 1.0
"""

from fastapi import APIRouter

from credential_service.api.endpoints import auth_router, users_router

# Initialize main API router
api_router = APIRouter()

api_router.include_router(users_router)
api_router.include_router(auth_router)

# Export router
__all__ = ["api_router"]
