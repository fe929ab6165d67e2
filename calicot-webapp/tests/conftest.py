"""
Shared pytest fixtures for calicot-webapp tests.
"""
import copy
import os
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from gridfs.errors import NoFile
from pymongo.errors import DuplicateKeyError


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "APP_ENV": "production",
        "FORCE_HTTPS": "false",
        "COSMOS_DB_DATABASE_NAME": "test_calicot",
        "COSMOS_DB_CONTAINER_NAME": "produits",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.environment = "production"
    mock.is_development = False
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.jwt_public_key = ""
    mock.jwt_private_key = ""
    mock.access_token_expire_minutes = 60
    mock.cosmos_db_database_name = "test_calicot"
    mock.cosmos_db_container_name = "produits"
    mock.cosmos_db_partition_key = "/id"
    mock.blob_storage_default_container = "images"
    mock.form_value_count_limit = 10
    mock.static_root = "wwwroot"
    mock.google_client_id = "google-client-id"
    mock.google_client_secret = "google-client-secret"
    mock.google_redirect_uri = "https://localhost/account/externallogincallback"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("calicot.core.config.get_settings", return_value=mock), patch(
        "calicot.core.security.get_settings", return_value=mock
    ), patch("calicot.api.controllers.files_controller.get_settings", return_value=mock), patch(
        "calicot.api.controllers.spa_controller.get_settings", return_value=mock
    ), patch("calicot.infrastructure.external.google_oauth_client.get_settings", return_value=mock):
        yield mock


def _matches(document: Dict[str, Any], query_filter: Dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query_filter.items())


class _DeleteResult:
    def __init__(self, deleted_count: int) -> None:
        self.deleted_count = deleted_count


class _InsertResult:
    def __init__(self, inserted_id: ObjectId) -> None:
        self.inserted_id = inserted_id


class InMemoryCollection:
    """Just enough of AsyncIOMotorCollection for repository tests (unique on `id`)."""

    def __init__(self, name: str = "produits") -> None:
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    async def find_one(self, query_filter: Dict[str, Any], projection: Optional[Dict[str, Any]] = None):
        for document in self.documents:
            if _matches(document, query_filter):
                return copy.deepcopy(document)
        return None

    def find(self, query_filter: Dict[str, Any]):
        async def iterate():
            for document in list(self.documents):
                if _matches(document, query_filter):
                    yield copy.deepcopy(document)
        return iterate()

    async def insert_one(self, document: Dict[str, Any]):
        if any(existing.get("id") == document.get("id") for existing in self.documents):
            raise DuplicateKeyError("E11000 duplicate key error collection: produits index: partition_key")
        stored = copy.deepcopy(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return _InsertResult(stored["_id"])

    async def replace_one(self, query_filter: Dict[str, Any], document: Dict[str, Any], upsert: bool = False):
        for index, existing in enumerate(self.documents):
            if _matches(existing, query_filter):
                replacement = copy.deepcopy(document)
                replacement["_id"] = existing["_id"]
                self.documents[index] = replacement
                return
        if upsert:
            await self.insert_one(document)

    async def delete_one(self, query_filter: Dict[str, Any]):
        for index, existing in enumerate(self.documents):
            if _matches(existing, query_filter):
                del self.documents[index]
                return _DeleteResult(1)
        return _DeleteResult(0)


class _StoredFile:
    def __init__(self, file_id: ObjectId, filename: str, data: bytes, metadata: Dict[str, Any]) -> None:
        self._id = file_id
        self.filename = filename
        self.data = data
        self.metadata = metadata

    async def read(self) -> bytes:
        return self.data


class InMemoryGridFSBucket:
    """Just enough of AsyncIOMotorGridFSBucket for blob service tests."""

    def __init__(self) -> None:
        self.files: List[_StoredFile] = []

    async def upload_from_stream(self, filename: str, source: Any, metadata: Optional[Dict[str, Any]] = None):
        data = source if isinstance(source, bytes) else source.read()
        stored = _StoredFile(ObjectId(), filename, data, metadata or {})
        self.files.append(stored)
        return stored._id

    async def open_download_stream_by_name(self, filename: str):
        matching = [stored for stored in self.files if stored.filename == filename]
        if not matching:
            raise NoFile(f"no version -1 for filename {filename!r}")
        return matching[-1]

    def find(self, query_filter: Dict[str, Any]):
        async def iterate():
            for stored in list(self.files):
                if stored.filename == query_filter.get("filename"):
                    yield stored
        return iterate()

    async def delete(self, file_id: ObjectId) -> None:
        before = len(self.files)
        self.files = [stored for stored in self.files if stored._id != file_id]
        if len(self.files) == before:
            raise NoFile(f"File id {file_id!r} not found")


@pytest.fixture
def produit_collection():
    return InMemoryCollection()


@pytest.fixture
def gridfs_buckets():
    """Patch the GridFS bucket class; yields the per-container fake buckets."""
    buckets: Dict[str, InMemoryGridFSBucket] = {}

    def make_bucket(database, bucket_name="fs"):
        return buckets.setdefault(bucket_name, InMemoryGridFSBucket())

    with patch(
        "calicot.infrastructure.storage.gridfs_blob_storage_service.AsyncIOMotorGridFSBucket",
        side_effect=make_bucket,
    ):
        yield buckets
