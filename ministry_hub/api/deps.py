"""Shared FastAPI dependencies: DB session, caller identity, admin gate, storage, limiter."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ministry_hub.core.config import get_settings
from ministry_hub.core.database import get_db
from ministry_hub.core.security import Role
from ministry_hub.services.identity import Identity, resolve_identity
from ministry_hub.services.storage import StorageGateway, storage_from_settings
from ministry_hub.services.upload_guard import UploadRateLimiter

DbSession = Annotated[Session, Depends(get_db)]

# Stands in for the caller when AUTH_ENABLED is false.
ANONYMOUS_ADMIN = Identity(id=0, email="anonymous@localhost", role=Role.ADMIN)


def get_identity(request: Request) -> Identity | None:
    """Dependency: resolved identity or None; never rejects."""
    return resolve_identity(request, get_settings())


def get_current_user(
    identity: Annotated[Identity | None, Depends(get_identity)],
) -> Identity:
    """Dependency: require a valid session. Raises 401 if missing or invalid."""
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return identity


def require_admin(
    identity: Annotated[Identity | None, Depends(get_identity)],
) -> Identity:
    """Dependency: require role 'admin'. 401 without a session, 403 for non-admins."""
    if not get_settings().AUTH_ENABLED:
        return identity if identity is not None else ANONYMOUS_ADMIN
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if not identity.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return identity


@lru_cache
def _storage_gateway() -> StorageGateway:
    return storage_from_settings(get_settings())


def get_storage() -> StorageGateway:
    """Dependency: the bucket gateway. Raises StorageNotConfiguredError (503) when unset."""
    return _storage_gateway()


def get_upload_limiter(request: Request) -> UploadRateLimiter:
    """Dependency: the limiter owned by the running app (see main.py)."""
    return request.app.state.upload_limiter


AdminUser = Annotated[Identity, Depends(require_admin)]
Storage = Annotated[StorageGateway, Depends(get_storage)]
