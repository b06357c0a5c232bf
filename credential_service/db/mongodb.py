"""
MongoDB database initialization and connection management.

Version: 1.0
"""

import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from typing import Optional

from credential_service.core.exceptions import StoreUnavailable

# Configure module logger
logger = logging.getLogger(__name__)

# Global database connection objects
_mongodb_client: Optional[AsyncIOMotorClient] = None
_mongodb_db = None

async def init_mongodb(url: str, db_name: str) -> bool:
    """
    Initialize MongoDB connection with connection pooling.

    Args:
        url: MongoDB connection string
        db_name: Database to use

    Returns:
        bool: True if connection successful, False otherwise
    """
    global _mongodb_client, _mongodb_db

    try:
        client = AsyncIOMotorClient(
            url,
            maxPoolSize=10,
            minPoolSize=1,
            serverSelectionTimeoutMS=5000
        )

        # Verify connection is alive
        await client.admin.command('ping')

        _mongodb_client = client
        _mongodb_db = client[db_name]

        logger.info(f"Successfully connected to MongoDB database {db_name}")
        return True

    except PyMongoError as e:
        logger.error(f"Failed to connect to MongoDB: {str(e)}")
        return False

async def get_database():
    """
    Get MongoDB database instance.

    Returns:
        AsyncIOMotorDatabase: MongoDB database instance

    Raises:
        StoreUnavailable: If the connection was never initialized
    """
    if _mongodb_db is None:
        raise StoreUnavailable("Database connection not initialized")

    return _mongodb_db

async def close_mongodb_connection() -> None:
    """Close MongoDB connection gracefully."""
    global _mongodb_client, _mongodb_db

    if _mongodb_client is not None:
        _mongodb_client.close()
        _mongodb_client = None
        _mongodb_db = None
        logger.info("MongoDB connection closed")
