from .gridfs_connection import get_blob_database, close_blob_database
from .gridfs_blob_storage_service import GridFsBlobStorageService

__all__ = ["get_blob_database", "close_blob_database", "GridFsBlobStorageService"]
