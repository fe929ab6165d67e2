# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get the document store database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.document_store_uri)
    _mongo_database = _mongo_client[settings.cosmos_db_database_name]
    logger.info(f"Document store client created for database {settings.cosmos_db_database_name}")
    return _mongo_database


def get_produit_collection() -> AsyncIOMotorCollection:
    """
    Get the product container from the document store

    Returns:
        MongoDB collection for products
    """
    return get_database()[get_settings().cosmos_db_container_name]


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from the document store

    Returns:
        MongoDB collection for users
    """
    return get_database()[get_settings().users_collection_name]


def close_database() -> None:
    """Close the shared client (call on application shutdown)"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Document store client closed")
    _mongo_client = None
    _mongo_database = None
