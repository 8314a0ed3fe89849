"""S3-compatible object storage: uploads, presigned downloads, proxy reads and deletes.

The database only stores keys/URLs; bytes live in the bucket.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

if TYPE_CHECKING:
    from ministry_hub.core.config import Settings

logger = logging.getLogger(__name__)

MAX_PRESIGN_TTL_SECONDS = 24 * 60 * 60
DEFAULT_PRESIGN_TTL_SECONDS = 60 * 60

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class StorageError(Exception):
    """Raised when the storage backend fails (network, auth, unexpected response)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class StorageNotConfiguredError(StorageError):
    """Raised when storage is used but endpoint, bucket or credentials are missing."""


@dataclass(frozen=True)
class PresignedUrl:
    url: str
    expires_in: int
    expires_at: datetime


@dataclass(frozen=True)
class StoredObject:
    body: bytes
    content_type: str


def clamp_ttl(ttl_seconds: int) -> int:
    """Clamp a requested presign TTL into 1 second .. 24 hours."""
    return max(1, min(int(ttl_seconds), MAX_PRESIGN_TTL_SECONDS))


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class StorageGateway:
    """Thin wrapper over a boto3 S3 client bound to one bucket."""

    def __init__(self, client: Any, bucket: str, public_base_url: str) -> None:
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{key.lstrip('/')}"

    def put_object(
        self,
        key: str,
        data: bytes,
        *,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ) -> None:
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                Metadata=metadata or {},
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Storage upload failed", extra={"key": key, "reason": str(e)[:300]})
            raise StorageError("Failed to store file") from e

    def presign_download(self, key: str, ttl_seconds: int = DEFAULT_PRESIGN_TTL_SECONDS) -> PresignedUrl:
        expires_in = clamp_ttl(ttl_seconds)
        try:
            url = self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Presign failed", extra={"key": key, "reason": str(e)[:300]})
            raise StorageError("Failed to generate download URL") from e
        return PresignedUrl(
            url=url,
            expires_in=expires_in,
            expires_at=datetime.now(UTC) + timedelta(seconds=expires_in),
        )

    def fetch_object(self, key: str) -> StoredObject | None:
        """Read one object fully. None when the key does not exist."""
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=key)
            body = response["Body"].read()
        except ClientError as e:
            if _error_code(e) in _MISSING_OBJECT_CODES:
                return None
            logger.error("Storage read failed", extra={"key": key, "reason": str(e)[:300]})
            raise StorageError("Failed to read file") from e
        except BotoCoreError as e:
            logger.error("Storage read failed", extra={"key": key, "reason": str(e)[:300]})
            raise StorageError("Failed to read file") from e
        return StoredObject(
            body=body,
            content_type=response.get("ContentType") or "application/octet-stream",
        )

    def delete_object(self, key: str) -> None:
        """Delete once; no retry. Failures surface as StorageError."""
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error("Storage delete failed", extra={"key": key, "reason": str(e)[:300]})
            raise StorageError("Failed to delete file") from e


def is_storage_configured(settings: Settings) -> bool:
    if not settings.STORAGE_URL or not settings.STORAGE_BUCKET:
        return False
    if not settings.STORAGE_ACCESS_KEY or settings.STORAGE_SECRET_KEY is None:
        return False
    return bool(settings.STORAGE_SECRET_KEY.get_secret_value().strip())


def storage_from_settings(settings: Settings) -> StorageGateway:
    """Build the gateway; raises StorageNotConfiguredError instead of guessing defaults."""
    if not is_storage_configured(settings):
        raise StorageNotConfiguredError(
            "Object storage is not configured. Set STORAGE_URL, STORAGE_BUCKET, "
            "STORAGE_ACCESS_KEY and STORAGE_SECRET_KEY."
        )
    endpoint = f"https://{settings.STORAGE_URL}"
    client = boto3.client(
        "s3",
        endpoint_url=endpoint,
        region_name=settings.STORAGE_REGION or None,
        aws_access_key_id=settings.STORAGE_ACCESS_KEY,
        aws_secret_access_key=settings.STORAGE_SECRET_KEY.get_secret_value(),
        config=Config(
            s3={"addressing_style": "path"},
            connect_timeout=settings.STORAGE_REQUEST_TIMEOUT_SEC,
            read_timeout=settings.STORAGE_REQUEST_TIMEOUT_SEC,
            retries={"max_attempts": 1},
        ),
    )
    return StorageGateway(client=client, bucket=settings.STORAGE_BUCKET, public_base_url=endpoint)
