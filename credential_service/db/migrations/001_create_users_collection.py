"""
Migration script to create users collection with indexes and validation.

Version: 1.0
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import IndexModel, ASCENDING
from pymongo.errors import CollectionInvalid, PyMongoError
import logging

from credential_service.core.constants import USERS_COLLECTION, EMAIL_INDEX_NAME

logger = logging.getLogger(__name__)

USERS_VALIDATOR = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": ["name", "email", "password_hash", "created_at"],
        "properties": {
            "name": {"bsonType": "string", "minLength": 1},
            "email": {
                "bsonType": "string",
                # Stored emails are always lowercase
                "pattern": "^[^A-Z]+$"
            },
            "password_hash": {"bsonType": "string"},
            "created_at": {"bsonType": "date"}
        }
    }
}

USERS_INDEXES = [
    IndexModel([("email", ASCENDING)], unique=True, name=EMAIL_INDEX_NAME),
    IndexModel([("created_at", ASCENDING)]),
]

async def upgrade(db: AsyncIOMotorDatabase) -> bool:
    """
    Upgrade database: Create users collection with indexes and validation.

    Args:
        db: AsyncIOMotorDatabase instance

    Returns:
        bool: True if migration successful, False otherwise
    """
    try:
        try:
            await db.create_collection(USERS_COLLECTION, validator=USERS_VALIDATOR)
            logger.info("Created users collection")
        except CollectionInvalid:
            logger.info("Users collection already exists")

        # The unique email index is the authoritative uniqueness guard
        await db[USERS_COLLECTION].create_indexes(USERS_INDEXES)

        logger.info("Successfully created/updated users collection with indexes")
        return True

    except PyMongoError as e:
        logger.error(f"Error in users collection migration: {str(e)}")
        return False

async def downgrade(db: AsyncIOMotorDatabase) -> bool:
    """
    Downgrade database: Remove users collection.

    Args:
        db: AsyncIOMotorDatabase instance

    Returns:
        bool: True if downgrade successful, False otherwise
    """
    try:
        await db[USERS_COLLECTION].drop()
        logger.info("Successfully dropped users collection")
        return True

    except PyMongoError as e:
        logger.error(f"Error in users collection downgrade: {str(e)}")
        return False
