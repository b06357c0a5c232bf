"""
Test suite for MongoDB connection management.

Version: 1.0
"""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from credential_service.core.exceptions import StoreUnavailable
from credential_service.db import mongodb

@pytest.fixture(autouse=True)
def reset_connection(monkeypatch):
    monkeypatch.setattr(mongodb, "_mongodb_client", None)
    monkeypatch.setattr(mongodb, "_mongodb_db", None)

@pytest.fixture
def motor_client(mocker):
    client = mocker.MagicMock()
    client.admin.command = mocker.AsyncMock(return_value={"ok": 1})
    mocker.patch.object(mongodb, "AsyncIOMotorClient", return_value=client)
    return client

@pytest.mark.asyncio
async def test_get_database_before_init_raises_store_unavailable():
    with pytest.raises(StoreUnavailable):
        await mongodb.get_database()

@pytest.mark.asyncio
async def test_init_pings_and_selects_database(motor_client):
    assert await mongodb.init_mongodb("mongodb://localhost:27017", "credentials") is True

    motor_client.admin.command.assert_awaited_once_with("ping")
    assert await mongodb.get_database() is motor_client["credentials"]

@pytest.mark.asyncio
async def test_init_failure_returns_false(motor_client):
    motor_client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

    assert await mongodb.init_mongodb("mongodb://localhost:27017", "credentials") is False
    with pytest.raises(StoreUnavailable):
        await mongodb.get_database()

@pytest.mark.asyncio
async def test_close_connection(motor_client):
    await mongodb.init_mongodb("mongodb://localhost:27017", "credentials")

    await mongodb.close_mongodb_connection()

    motor_client.close.assert_called_once()
    with pytest.raises(StoreUnavailable):
        await mongodb.get_database()
