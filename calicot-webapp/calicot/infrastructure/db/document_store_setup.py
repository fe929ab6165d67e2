"""
Startup initialization of the document store.

Creates the product container when it is missing and makes the partition
key field unique. Safe to run on every start.
"""
# Standard library imports
import logging

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import CollectionInvalid

logger = logging.getLogger(__name__)

PARTITION_KEY_INDEX_NAME = "partition_key"


async def initialize_document_store(
    database: AsyncIOMotorDatabase,
    container_name: str,
    partition_key_path: str = "/id",
) -> None:
    """
    Create the container if it does not exist, partitioned on partition_key_path.

    Args:
        database: Target database (created implicitly with its first collection)
        container_name: Product container name
        partition_key_path: Partition key path, e.g. "/id"
    """
    key_field = partition_key_path.strip("/") or "id"

    existing = await database.list_collection_names()
    if container_name not in existing:
        try:
            await database.create_collection(container_name)
            logger.info(f"Created container {container_name} in database {database.name}")
        except CollectionInvalid:
            # Created concurrently by another worker
            logger.info(f"Container {container_name} already exists")
    else:
        logger.info(f"Container {container_name} already exists")

    # create_index is a no-op when an identical index exists
    await database[container_name].create_index(
        key_field,
        unique=True,
        name=PARTITION_KEY_INDEX_NAME,
    )
    logger.info(f"Partition key {partition_key_path} ensured on {container_name}")
