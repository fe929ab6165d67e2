# Standard library imports
import io
import logging
from typing import Any, BinaryIO, Dict, Optional, TYPE_CHECKING

# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorGridFSBucket

# Local application imports
from ...domain.repositories.blob_storage_service import BlobStorageService
from .gridfs_connection import get_blob_database

if TYPE_CHECKING:
    from fastapi import UploadFile

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"
CONTENT_TYPE_KEY = "contentType"


class GridFsBlobStorageService(BlobStorageService):
    """
    GridFS implementation of BlobStorageService.

    Each container is a GridFS bucket of the same name. A blob name maps to
    a single stored file: uploads remove older revisions once the new one
    is written.
    """

    def __init__(self, database: Optional[AsyncIOMotorDatabase] = None) -> None:
        self.database = database if database is not None else get_blob_database()
        self._buckets: Dict[str, AsyncIOMotorGridFSBucket] = {}

    def _bucket(self, container_name: str) -> AsyncIOMotorGridFSBucket:
        if not container_name:
            raise ValueError("Container name is required")
        bucket = self._buckets.get(container_name)
        if bucket is None:
            bucket = AsyncIOMotorGridFSBucket(self.database, bucket_name=container_name)
            self._buckets[container_name] = bucket
        return bucket

    async def get_blob_data(self, file_name: str, container_name: str) -> io.BytesIO:
        """
        Download a blob

        Raises:
            gridfs.errors.NoFile: If no blob with that name exists
        """
        grid_out = await self._bucket(container_name).open_download_stream_by_name(file_name)
        data = await grid_out.read()
        return io.BytesIO(data)

    async def get_content_type(self, file_name: str, container_name: str) -> str:
        grid_out = await self._bucket(container_name).open_download_stream_by_name(file_name)
        metadata = grid_out.metadata or {}
        return metadata.get(CONTENT_TYPE_KEY) or DEFAULT_CONTENT_TYPE

    async def upload_file_to_blob(
        self, file_name: str, file: "UploadFile", file_mime_type: str, container_name: str
    ) -> str:
        data = await file.read()
        return await self._upload(file_name, data, file_mime_type, container_name)

    async def upload_file_stream_to_blob(
        self, file_name: str, file: BinaryIO, file_mime_type: str, container_name: str
    ) -> str:
        return await self._upload(file_name, file, file_mime_type, container_name)

    async def upload_memory_stream_to_blob(
        self, file_name: str, file: io.BytesIO, file_mime_type: str, container_name: str
    ) -> str:
        file.seek(0)
        return await self._upload(file_name, file, file_mime_type, container_name)

    async def delete_blob_data(self, file_name: str, container_name: str) -> None:
        """
        Delete every stored revision of a blob

        Raises:
            gridfs.errors.NoFile: If no blob with that name exists
        """
        bucket = self._bucket(container_name)
        file_ids = [grid_out._id async for grid_out in bucket.find({"filename": file_name})]
        if not file_ids:
            # Let the driver report the missing blob
            await bucket.open_download_stream_by_name(file_name)
        for file_id in file_ids:
            await bucket.delete(file_id)
        logger.info(f"Deleted blob {container_name}/{file_name} ({len(file_ids)} revision(s))")

    async def _upload(self, file_name: str, source: Any, file_mime_type: str, container_name: str) -> str:
        if not file_name:
            raise ValueError("File name is required")

        bucket = self._bucket(container_name)
        previous_ids = [grid_out._id async for grid_out in bucket.find({"filename": file_name})]

        await bucket.upload_from_stream(
            file_name,
            source,
            metadata={CONTENT_TYPE_KEY: file_mime_type or DEFAULT_CONTENT_TYPE},
        )
        for file_id in previous_ids:
            await bucket.delete(file_id)

        location = f"{container_name}/{file_name}"
        logger.info(f"Uploaded blob {location}")
        return location
