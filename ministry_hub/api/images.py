"""Image proxy: serve bucket objects (or images on allowed hosts) with long-lived cache headers."""

import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import Response

from ministry_hub.api.deps import Storage
from ministry_hub.core.config import get_settings
from ministry_hub.services.storage import StorageGateway

logger = logging.getLogger(__name__)

router = APIRouter()

CACHE_CONTROL = "public, max-age=31536000, immutable"


def _image_response(body: bytes, content_type: str) -> Response:
    return Response(
        content=body,
        media_type=content_type,
        headers={"Cache-Control": CACHE_CONTROL},
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found")


def _fetch_failed() -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Failed to fetch image")


def allowed_image_hosts(storage: StorageGateway) -> set[str]:
    """The storage endpoint host plus IMAGE_PROXY_ALLOWED_HOSTS."""
    hosts = {host.lower() for host in get_settings().image_proxy_allowed_hosts}
    hosts.add(httpx.URL(storage.public_base_url).host.lower())
    return hosts


def _parse_image_url(url: str, allowed_hosts: set[str]) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid image URL") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid image URL")
    if parsed.host.lower() not in allowed_hosts:
        logger.warning("Image proxy host rejected", extra={"host": parsed.host})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image host is not allowed")
    return parsed


def _fetch_remote(url: httpx.URL) -> Response:
    timeout = get_settings().STORAGE_REQUEST_TIMEOUT_SEC
    try:
        # Redirects are not followed: a 3xx answer counts as a failed fetch.
        with httpx.Client(timeout=timeout, follow_redirects=False) as client:
            r = client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Remote image fetch failed", extra={"url": str(url), "reason": str(e)[:300]})
        raise _fetch_failed() from e
    if r.status_code == status.HTTP_404_NOT_FOUND:
        raise _not_found()
    if r.status_code != status.HTTP_200_OK:
        logger.warning("Remote image fetch failed", extra={"url": str(url), "status_code": r.status_code})
        raise _fetch_failed()
    content_type = r.headers.get("content-type", "")
    if not content_type.lower().startswith("image/"):
        logger.warning("Remote resource is not an image", extra={"url": str(url), "content_type": content_type})
        raise _fetch_failed()
    return _image_response(r.content, content_type)


@router.get("")
def get_image(
    storage: Storage,
    key: Annotated[str | None, Query(max_length=1024)] = None,
    url: Annotated[str | None, Query(max_length=2048)] = None,
) -> Response:
    """Serve `key` from the bucket, or fetch `url` when its host is the storage host or explicitly allowed."""
    if key:
        obj = storage.fetch_object(key)
        if obj is None:
            raise _not_found()
        return _image_response(obj.body, obj.content_type)
    if url:
        return _fetch_remote(_parse_image_url(url, allowed_image_hosts(storage)))
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing key or url parameter")
