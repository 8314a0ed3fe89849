"""File upload to object storage, presigned downloads and deletes."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.datastructures import UploadFile

from ministry_hub.api.deps import AdminUser, Storage, get_upload_limiter
from ministry_hub.core.config import get_settings
from ministry_hub.schemas.upload import (
    DeleteObjectRequest,
    DeleteObjectResponse,
    PresignedUrlData,
    PresignRequest,
    PresignResponse,
    UploadedFile,
    UploadInfo,
    UploadResponse,
)
from ministry_hub.services.upload_guard import (
    UploadRateLimiter,
    client_ip,
    sanitize_filename,
    secure_filename,
    validate_file,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_FOLDER = "uploads"


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.post("", response_model=UploadResponse)
async def upload_file(
    request: Request,
    storage: Storage,
    limiter: Annotated[UploadRateLimiter, Depends(get_upload_limiter)],
) -> UploadResponse:
    """
    Store one file from a multipart form (`file`, optional `folder`).

    The stored name is random; the sanitized original name is kept in the
    object metadata and echoed back.
    """
    ip = client_ip(request)
    if not limiter.check_rate(ip):
        logger.warning("Upload rate limit exceeded", extra={"client_ip": ip})
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many upload requests. Please try again later.",
        )

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type != "multipart/form-data":
        raise _bad_request("Content type must be multipart/form-data")

    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile):
        raise _bad_request("No file provided")
    folder = form.get("folder")
    folder = folder if isinstance(folder, str) and folder.strip() else DEFAULT_FOLDER

    data = await file.read()
    settings = get_settings()
    filename = file.filename or ""
    reason = validate_file(
        filename,
        file.content_type,
        len(data),
        allowed_types=settings.allowed_upload_types,
        max_size=settings.STORAGE_MAX_SIZE,
    )
    if reason is not None:
        logger.info("Upload rejected", extra={"client_ip": ip, "reason": reason})
        raise _bad_request(reason)

    original_name = sanitize_filename(filename)
    stored_name = secure_filename(original_name)
    key = f"{sanitize_filename(folder)}/{stored_name}"
    storage.put_object(
        key,
        data,
        content_type=file.content_type,
        metadata={
            "originalname": original_name,
            "uploadedat": datetime.now(UTC).isoformat(),
            "securitychecked": "true",
        },
    )
    logger.info("File uploaded", extra={"key": key, "size": len(data)})
    return UploadResponse(
        data=UploadedFile(
            key=key,
            file_name=stored_name,
            original_name=original_name,
            size=len(data),
            type=file.content_type,
            url=storage.public_url(key),
        )
    )


@router.get("", response_model=UploadInfo)
def upload_info() -> UploadInfo:
    settings = get_settings()
    return UploadInfo(
        message="Upload endpoint is running",
        max_size=settings.STORAGE_MAX_SIZE,
        allowed_types=settings.allowed_upload_types,
    )


@router.post("/presigned-url", response_model=PresignResponse)
def create_presigned_url(body: PresignRequest, storage: Storage, _admin: AdminUser) -> PresignResponse:
    """Time-limited download URL; the TTL is clamped to 24 hours."""
    presigned = storage.presign_download(body.key, body.expires_in)
    return PresignResponse(
        data=PresignedUrlData(
            url=presigned.url,
            expires_in=presigned.expires_in,
            expires_at=presigned.expires_at,
        )
    )


@router.delete("/delete", response_model=DeleteObjectResponse)
def delete_file(body: DeleteObjectRequest, storage: Storage, _admin: AdminUser) -> DeleteObjectResponse:
    storage.delete_object(body.key)
    logger.info("File deleted", extra={"key": body.key})
    return DeleteObjectResponse()
