"""Request/response schemas for upload, presign, delete and image proxy endpoints."""

from datetime import datetime

from pydantic import Field

from ministry_hub.schemas.common import CamelModel


class UploadedFile(CamelModel):
    key: str
    file_name: str
    original_name: str
    size: int = Field(..., ge=0)
    type: str
    url: str


class UploadResponse(CamelModel):
    success: bool = True
    data: UploadedFile


class UploadInfo(CamelModel):
    message: str
    max_size: int
    allowed_types: list[str]


class PresignRequest(CamelModel):
    key: str = Field(..., min_length=1, max_length=1024)
    expires_in: int = Field(default=3600, description="Requested TTL in seconds; clamped to 24 hours.")


class PresignedUrlData(CamelModel):
    url: str
    expires_in: int
    expires_at: datetime


class PresignResponse(CamelModel):
    success: bool = True
    data: PresignedUrlData


class DeleteObjectRequest(CamelModel):
    key: str = Field(..., min_length=1, max_length=1024)


class DeleteObjectResponse(CamelModel):
    success: bool = True
    message: str = "File deleted successfully"
