"""Upload rate limiting and file checks for the upload endpoint.

The limiter counts in the storage named by its URI. With the default
``memory://`` several workers or instances each keep their own counts.
"""

import re
import secrets
import time

from limits import RateLimitItemPerMinute
from limits.storage import Storage, storage_from_string
from limits.strategies import FixedWindowRateLimiter
from starlette.requests import HTTPConnection

RATE_LIMIT_NAMESPACE = "upload"

_SUSPICIOUS_NAME_PATTERNS = (
    re.compile(r"\.\."),
    re.compile(r"[/\\|]"),
    re.compile(r"[<>]"),
    re.compile(r"\$\(|`"),
    re.compile(r"\.(php|asp|jsp|exe|bat|sh)$", re.IGNORECASE),
)


class UploadRateLimiter:
    """Fixed window of `limit_per_minute` uploads per client IP."""

    def __init__(self, limit_per_minute: int, storage_uri: str = "memory://") -> None:
        if limit_per_minute < 1:
            raise ValueError("limit_per_minute must be at least 1")
        self.limit_per_minute = limit_per_minute
        self._item = RateLimitItemPerMinute(limit_per_minute)
        self._storage: Storage = storage_from_string(storage_uri)
        self._limiter = FixedWindowRateLimiter(self._storage)

    def check_rate(self, client_ip: str) -> bool:
        """Count one attempt for client_ip; False once the window's limit is reached."""
        return self._limiter.hit(self._item, RATE_LIMIT_NAMESPACE, client_ip)

    def clear(self, client_ip: str) -> None:
        """Forget the current window for one client."""
        self._limiter.clear(self._item, RATE_LIMIT_NAMESPACE, client_ip)

    def reset(self) -> None:
        self._storage.reset()


def format_file_size(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    units = ("Bytes", "KB", "MB", "GB", "TB")
    value = float(size)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {units[i]}"


def has_suspicious_name(filename: str) -> bool:
    return any(p.search(filename) for p in _SUSPICIOUS_NAME_PATTERNS)


def validate_file(
    filename: str,
    content_type: str | None,
    size: int,
    *,
    allowed_types: list[str],
    max_size: int,
) -> str | None:
    """Return the rejection reason, or None when the file is acceptable."""
    if size > max_size:
        return f"File size exceeds maximum limit of {format_file_size(max_size)}"
    if not content_type or content_type not in allowed_types:
        return f"File type {content_type or 'unknown'} is not allowed"
    if not filename or has_suspicious_name(filename):
        return "File name contains invalid characters"
    return None


def sanitize_filename(filename: str) -> str:
    """Keep [A-Za-z0-9.-], collapse dots, drop a leading dot, cap at 255 chars."""
    name = re.sub(r"[^a-zA-Z0-9.-]", "_", filename)
    name = re.sub(r"\.+", ".", name)
    name = re.sub(r"^\.", "", name)
    return name[:255]


def secure_filename(original_name: str) -> str:
    """Unguessable storage name: <epoch ms>-<32 hex chars>.<original extension>."""
    ext = original_name.rsplit(".", 1)[-1] if "." in original_name else "bin"
    return f"{int(time.time() * 1000)}-{secrets.token_hex(16)}.{ext}"


def client_ip(request: HTTPConnection) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
