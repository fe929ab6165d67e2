"""
Unit tests for DIContainer wiring (connections patched, nothing contacted).
"""
from unittest.mock import MagicMock, patch

import pytest

from calicot.application.use_cases.auth import (
    AuthenticateUserUseCase,
    ExternalLoginUseCase,
    GetCurrentUserUseCase,
)
from calicot.di.container import DIContainer, get_container, reset_container
from calicot.domain.repositories import BlobStorageService, ProduitRepository, UserRepository
from calicot.infrastructure.db.mongo_produit_repository import MongoProduitRepository
from calicot.infrastructure.external.google_oauth_client import GoogleOAuthClient
from calicot.infrastructure.storage.gridfs_blob_storage_service import GridFsBlobStorageService


@pytest.fixture
def patched_connections(mock_settings):
    produit_collection = MagicMock()
    user_collection = MagicMock()
    blob_database = MagicMock()
    with patch(
        "calicot.di.providers.database_provider.get_produit_collection", return_value=produit_collection
    ), patch(
        "calicot.di.providers.database_provider.get_user_collection", return_value=user_collection
    ), patch(
        "calicot.di.providers.storage_provider.get_blob_database", return_value=blob_database
    ):
        yield {
            "produit_collection": produit_collection,
            "user_collection": user_collection,
            "blob_database": blob_database,
        }


def test_repositories_use_registered_collections(patched_connections):
    container = DIContainer()

    produit_repository = container.get(ProduitRepository)
    assert isinstance(produit_repository, MongoProduitRepository)
    assert produit_repository.produit_collection is patched_connections["produit_collection"]
    assert container.get(UserRepository).user_collection is patched_connections["user_collection"]


def test_blob_storage_is_singleton(patched_connections):
    container = DIContainer()

    blob_storage = container.get(BlobStorageService)
    assert isinstance(blob_storage, GridFsBlobStorageService)
    assert blob_storage.database is patched_connections["blob_database"]
    assert container.get(BlobStorageService) is blob_storage


def test_use_cases_are_built_per_lookup(patched_connections):
    container = DIContainer()

    assert isinstance(container.get(AuthenticateUserUseCase), AuthenticateUserUseCase)
    assert container.get(GetCurrentUserUseCase) is not container.get(GetCurrentUserUseCase)

    external_login = container.get(ExternalLoginUseCase)
    assert external_login.google_client is container.get(GoogleOAuthClient)


def test_get_container_is_global_until_reset(patched_connections):
    reset_container()
    first = get_container()
    assert get_container() is first
    reset_container()
    assert get_container() is not first
    reset_container()


def test_only_collections_are_registered_from_database_provider(patched_connections):
    container = DIContainer()

    assert container.get("produit_collection") is patched_connections["produit_collection"]
    assert container.get("user_collection") is patched_connections["user_collection"]
    assert not container.is_registered("database")
