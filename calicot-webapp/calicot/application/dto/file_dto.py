from pydantic import BaseModel


class FileUploadResponse(BaseModel):
    """DTO for blob upload response"""
    location: str
    file_name: str
    container: str
    content_type: str
