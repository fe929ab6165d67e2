"""
Fixtures for API integration tests.

The application is exercised through TestClient without entering its
lifespan, so no store is contacted. Every get_container() call site is
patched to a container holding in-memory stores and mocked use cases.
"""
from contextlib import ExitStack
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from calicot.application.dto.user_dto import UserResponse
from calicot.application.use_cases.auth.authenticate_user import AuthenticateUserUseCase
from calicot.application.use_cases.auth.external_login import ExternalLoginUseCase
from calicot.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from calicot.application.use_cases.auth.list_users import GetUserUseCase, ListUsersUseCase
from calicot.application.use_cases.auth.register_user import RegisterUserUseCase
from calicot.di.base_container import BaseContainer
from calicot.domain.repositories.blob_storage_service import BlobStorageService
from calicot.domain.repositories.produit_repository import ProduitRepository
from calicot.infrastructure.db.mongo_produit_repository import MongoProduitRepository
from calicot.infrastructure.storage.gridfs_blob_storage_service import GridFsBlobStorageService

VALID_TOKEN = "valid-token"

GET_CONTAINER_SITES = (
    "calicot.api.middleware.jwt_middleware.get_container",
    "calicot.api.controllers.produits_controller.get_container",
    "calicot.api.controllers.files_controller.get_container",
    "calicot.api.controllers.users_controller.get_container",
    "calicot.api.controllers.account_controller.get_container",
)


@pytest.fixture
def current_user():
    return UserResponse(id="usr-1", user_name="marie", email="marie@example.com")


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def container(produit_collection, gridfs_buckets, current_user):
    container = BaseContainer()
    container.register_singleton(ProduitRepository, MongoProduitRepository(produit_collection))
    container.register_singleton(BlobStorageService, GridFsBlobStorageService(database=MagicMock()))

    async def resolve_user(token):
        if token == VALID_TOKEN:
            return current_user
        raise ValueError("Invalid or expired token: Signature verification failed")

    get_current_user_use_case = AsyncMock(spec=GetCurrentUserUseCase)
    get_current_user_use_case.execute.side_effect = resolve_user
    container.register_singleton(GetCurrentUserUseCase, get_current_user_use_case)

    for use_case in (
        AuthenticateUserUseCase,
        RegisterUserUseCase,
        ListUsersUseCase,
        GetUserUseCase,
        ExternalLoginUseCase,
    ):
        container.register_singleton(use_case, AsyncMock(spec=use_case))
    return container


@pytest.fixture
def client(container):
    """Create test client with the patched container."""
    from calicot.main import app

    with ExitStack() as stack:
        for target in GET_CONTAINER_SITES:
            stack.enter_context(patch(target, return_value=container))
        yield TestClient(app)
