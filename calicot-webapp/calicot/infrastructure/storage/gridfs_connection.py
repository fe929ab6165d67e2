# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global blob store connection instances (singleton pattern)
_blob_client: Optional[AsyncIOMotorClient] = None
_blob_database: Optional[AsyncIOMotorDatabase] = None


def get_blob_database() -> AsyncIOMotorDatabase:
    """
    Get the database holding the GridFS buckets (one bucket per container)

    Returns:
        MongoDB database instance
    """
    global _blob_client, _blob_database

    if _blob_database is not None:
        return _blob_database

    settings = get_settings()
    _blob_client = AsyncIOMotorClient(settings.blob_storage_uri)
    _blob_database = _blob_client[settings.blob_storage_database_name]
    logger.info(f"Blob store client created for database {settings.blob_storage_database_name}")
    return _blob_database


def close_blob_database() -> None:
    global _blob_client, _blob_database

    if _blob_client is not None:
        _blob_client.close()
        logger.info("Blob store client closed")
    _blob_client = None
    _blob_database = None
