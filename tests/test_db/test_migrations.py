"""
Test suite for the migration runner and the users collection migration.

Version: 1.0
"""

import importlib
import pytest
from pymongo.errors import CollectionInvalid, OperationFailure

from credential_service.core.constants import EMAIL_INDEX_NAME, USERS_COLLECTION
from credential_service.db.migrations import list_migrations, run_migrations

users_migration = importlib.import_module(
    "credential_service.db.migrations.001_create_users_collection"
)

@pytest.fixture
def mock_db(mocker):
    """Motor database double recording collection and index creation."""
    collection = mocker.Mock()
    collection.create_indexes = mocker.AsyncMock(return_value=[EMAIL_INDEX_NAME])
    collection.drop = mocker.AsyncMock()

    db = mocker.MagicMock()
    db.create_collection = mocker.AsyncMock()
    db.__getitem__.return_value = collection
    return db

class TestUsersMigration:

    @pytest.mark.asyncio
    async def test_upgrade_creates_collection_and_unique_email_index(self, mock_db):
        assert await users_migration.upgrade(mock_db) is True

        mock_db.create_collection.assert_awaited_once()
        args, kwargs = mock_db.create_collection.call_args
        assert args == (USERS_COLLECTION,)
        assert "password_hash" in kwargs["validator"]["$jsonSchema"]["required"]

        indexes = mock_db[USERS_COLLECTION].create_indexes.call_args.args[0]
        email_index = next(i.document for i in indexes if i.document["name"] == EMAIL_INDEX_NAME)
        assert email_index["unique"] is True
        assert list(email_index["key"].keys()) == ["email"]

    @pytest.mark.asyncio
    async def test_upgrade_tolerates_existing_collection(self, mock_db):
        mock_db.create_collection.side_effect = CollectionInvalid("collection users already exists")

        assert await users_migration.upgrade(mock_db) is True
        mock_db[USERS_COLLECTION].create_indexes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_upgrade_reports_index_failure(self, mock_db):
        # Existing duplicate emails make the unique index build fail
        mock_db[USERS_COLLECTION].create_indexes.side_effect = OperationFailure("E11000 duplicate key")

        assert await users_migration.upgrade(mock_db) is False

    @pytest.mark.asyncio
    async def test_downgrade_drops_collection(self, mock_db):
        assert await users_migration.downgrade(mock_db) is True
        mock_db[USERS_COLLECTION].drop.assert_awaited_once()

class TestRunner:

    def test_migrations_are_ordered(self):
        migrations = list_migrations()

        assert migrations[0] == "001_create_users_collection"
        assert migrations == sorted(migrations)

    @pytest.mark.asyncio
    async def test_run_migrations_up(self, mock_db):
        assert await run_migrations(mock_db) is True
        mock_db.create_collection.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_migrations_stops_on_failure(self, mock_db, mocker):
        mocker.patch.object(users_migration, "upgrade", mocker.AsyncMock(return_value=False))

        assert await run_migrations(mock_db) is False

    @pytest.mark.asyncio
    async def test_run_migrations_rejects_unknown_direction(self, mock_db):
        with pytest.raises(ValueError):
            await run_migrations(mock_db, direction="sideways")
