"""
Blob file endpoints.

  GET    /files/download/{container}/{file_name}
  POST   /files/upload            multipart: file, container (optional)
  DELETE /files/delete/{container}/{file_name}
"""
# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from gridfs.errors import NoFile
from starlette.datastructures import UploadFile

# Local application imports
from ...application.dto.file_dto import FileUploadResponse
from ...application.dto.user_dto import UserResponse
from ...core.config import get_settings
from ...domain.repositories.blob_storage_service import BlobStorageService
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

DEFAULT_MIME_TYPE = "application/octet-stream"


def _blob_storage() -> BlobStorageService:
    return get_container().get(BlobStorageService)


def _blob_not_found(container: str, file_name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Blob {container}/{file_name} not found"
    )


@router.get("/download/{container}/{file_name}")
async def download_file(container: str, file_name: str) -> Response:
    """
    Stream a blob back with its stored content type
    """
    blob_storage = _blob_storage()
    try:
        content_type = await blob_storage.get_content_type(file_name, container)
        data = await blob_storage.get_blob_data(file_name, container)
    except NoFile:
        raise _blob_not_found(container, file_name)
    return Response(content=data.getvalue(), media_type=content_type)


@router.post("/upload", response_model=FileUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    request: Request,
    current_user: UserResponse = Depends(get_current_user),
) -> FileUploadResponse:
    """
    Upload a multipart file into a container

    The number of form fields per request is capped by FORM_VALUE_COUNT_LIMIT;
    file size is not limited here.
    """
    settings = get_settings()
    form = await request.form(max_fields=settings.form_value_count_limit)
    try:
        upload = form.get("file")
        if not isinstance(upload, UploadFile) or not upload.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Missing file."
            )

        container = form.get("container") or settings.blob_storage_default_container
        if not isinstance(container, str):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Container must be a text field."
            )

        content_type = upload.content_type or DEFAULT_MIME_TYPE
        location = await _blob_storage().upload_file_to_blob(
            upload.filename, upload, content_type, container
        )
    finally:
        await form.close()

    logger.info(f"User {current_user.user_name} uploaded {location}")
    return FileUploadResponse(
        location=location,
        file_name=upload.filename,
        container=container,
        content_type=content_type,
    )


@router.delete("/delete/{container}/{file_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    container: str,
    file_name: str,
    current_user: UserResponse = Depends(get_current_user),
) -> Response:
    try:
        await _blob_storage().delete_blob_data(file_name, container)
    except NoFile:
        raise _blob_not_found(container, file_name)
    logger.info(f"User {current_user.user_name} deleted {container}/{file_name}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
