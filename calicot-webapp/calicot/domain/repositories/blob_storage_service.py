# Standard library imports
import io
from abc import ABC, abstractmethod
from typing import BinaryIO, TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import UploadFile


class BlobStorageService(ABC):
    """
    Blob store contract: files addressed by name within a named container.

    Upload methods return the blob location. Missing blobs surface as the
    storage driver's own error.
    """

    @abstractmethod
    async def get_blob_data(self, file_name: str, container_name: str) -> io.BytesIO:
        pass

    @abstractmethod
    async def get_content_type(self, file_name: str, container_name: str) -> str:
        pass

    @abstractmethod
    async def upload_file_to_blob(
        self, file_name: str, file: "UploadFile", file_mime_type: str, container_name: str
    ) -> str:
        pass

    @abstractmethod
    async def upload_file_stream_to_blob(
        self, file_name: str, file: BinaryIO, file_mime_type: str, container_name: str
    ) -> str:
        pass

    @abstractmethod
    async def upload_memory_stream_to_blob(
        self, file_name: str, file: io.BytesIO, file_mime_type: str, container_name: str
    ) -> str:
        pass

    @abstractmethod
    async def delete_blob_data(self, file_name: str, container_name: str) -> None:
        pass
