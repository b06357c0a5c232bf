"""
PyTest configuration file for the credential service.
Provides an in-memory MongoDB, configured credential components and an HTTP
client bound to the FastAPI application.

Version: 1.0
"""

import os

# Settings are read at application import, so the environment comes first
TEST_JWT_SECRET = "test-signing-secret-with-enough-entropy-0123456789"
TEST_BCRYPT_ROUNDS = 4
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)
os.environ.setdefault("BCRYPT_ROUNDS", str(TEST_BCRYPT_ROUNDS))

# External imports with versions
import pytest  # pytest v7.3+
import pytest_asyncio  # pytest-asyncio v0.23+
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pymongo import ASCENDING
from typing import AsyncGenerator

# Internal imports
from credential_service.api.dependencies import get_credential_store, get_token_issuer
from credential_service.core.constants import EMAIL_INDEX_NAME, USERS_COLLECTION
from credential_service.core.security import TokenIssuer
from credential_service.services.credential_store import CredentialStore

# Global test constants
TEST_DB_NAME = "test_db"

@pytest_asyncio.fixture
async def users_collection():
    """
    Provides an isolated users collection with the unique email index.
    Uses mongomock-motor so no MongoDB server is needed.
    """
    client = AsyncMongoMockClient()
    collection = client[TEST_DB_NAME][USERS_COLLECTION]
    await collection.create_index(
        [("email", ASCENDING)], unique=True, name=EMAIL_INDEX_NAME
    )

    yield collection

    await collection.drop()

@pytest.fixture
def credential_store(users_collection) -> CredentialStore:
    """Credential store with a cheap bcrypt cost factor."""
    return CredentialStore(users_collection, rounds=TEST_BCRYPT_ROUNDS)

@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_JWT_SECRET, algorithm="HS256", expires_minutes=60)

@pytest.fixture
def test_app(credential_store, token_issuer):
    """
    Provides the FastAPI application wired to the test store and issuer.
    """
    from credential_service.main import app

    app.dependency_overrides[get_credential_store] = lambda: credential_store
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    yield app

    app.dependency_overrides.clear()

@pytest_asyncio.fixture
async def async_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides async HTTP client for API testing.
    """
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test"
    ) as client:
        yield client
