from typing import TYPE_CHECKING
from ...domain.repositories.blob_storage_service import BlobStorageService
from ...infrastructure.storage.gridfs_connection import get_blob_database
from ...infrastructure.storage.gridfs_blob_storage_service import GridFsBlobStorageService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Blob storage provider - one shared GridFS-backed service per process"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            BlobStorageService,
            GridFsBlobStorageService(database=get_blob_database())
        )
