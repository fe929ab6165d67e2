from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .storage_provider import StorageProvider
from .auth_provider import AuthProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "StorageProvider",
    "AuthProvider",
]
