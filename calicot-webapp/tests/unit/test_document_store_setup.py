"""
Unit tests for initialize_document_store.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import CollectionInvalid

from calicot.infrastructure.db.document_store_setup import (
    PARTITION_KEY_INDEX_NAME,
    initialize_document_store,
)


def _database(existing_collections):
    collection = MagicMock()
    collection.create_index = AsyncMock(return_value=PARTITION_KEY_INDEX_NAME)

    database = MagicMock()
    database.name = "test_calicot"
    database.list_collection_names = AsyncMock(side_effect=existing_collections)
    database.create_collection = AsyncMock()
    database.__getitem__.return_value = collection
    return database, collection


class TestInitializeDocumentStore:
    """Create-if-not-exists behavior"""

    @pytest.mark.asyncio
    async def test_creates_missing_container(self):
        database, collection = _database([[]])
        await initialize_document_store(database, "produits", "/id")

        database.create_collection.assert_awaited_once_with("produits")
        collection.create_index.assert_awaited_once_with(
            "id", unique=True, name=PARTITION_KEY_INDEX_NAME
        )

    @pytest.mark.asyncio
    async def test_twice_is_idempotent(self):
        database, collection = _database([[], ["produits"]])

        await initialize_document_store(database, "produits", "/id")
        await initialize_document_store(database, "produits", "/id")

        database.create_collection.assert_awaited_once_with("produits")
        assert collection.create_index.await_count == 2

    @pytest.mark.asyncio
    async def test_concurrent_creation_tolerated(self):
        database, collection = _database([[]])
        database.create_collection.side_effect = CollectionInvalid("collection produits already exists")

        await initialize_document_store(database, "produits", "/id")
        collection.create_index.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_partition_key_path_maps_to_field(self):
        database, collection = _database([["produits"]])
        await initialize_document_store(database, "produits", "/sku")

        database.create_collection.assert_not_awaited()
        assert collection.create_index.call_args.args[0] == "sku"
