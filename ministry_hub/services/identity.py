"""Resolve the caller's identity from the session cookie or trusted gateway headers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from starlette.requests import HTTPConnection

from ministry_hub.core.security import Role, verify_token

if TYPE_CHECKING:
    from ministry_hub.core.config import Settings

USER_ID_HEADER = "x-user-id"
USER_EMAIL_HEADER = "x-user-email"
USER_ROLE_HEADER = "x-user-role"


@dataclass(frozen=True)
class Identity:
    """Who is calling. Authorization is decided by the caller of resolve_identity."""

    id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def _from_headers(request: HTTPConnection) -> Identity | None:
    user_id = request.headers.get(USER_ID_HEADER)
    email = request.headers.get(USER_EMAIL_HEADER)
    role = Role.parse(request.headers.get(USER_ROLE_HEADER))
    if not user_id or not email or role is None:
        return None
    try:
        return Identity(id=int(user_id), email=email, role=role)
    except ValueError:
        return None


def resolve_identity(request: HTTPConnection, settings: "Settings") -> Identity | None:
    """
    Cookie token first; then, only when TRUST_PROXY_HEADERS is set, x-user-* headers.
    Returns None when neither yields an identity. Never raises for bad input.
    """
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    claims = verify_token(token, settings=settings)
    if claims is not None:
        return Identity(id=claims.id, email=claims.email, role=claims.role)
    if settings.TRUST_PROXY_HEADERS:
        return _from_headers(request)
    return None
