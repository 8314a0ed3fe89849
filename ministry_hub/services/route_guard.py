"""Gate in front of protected path prefixes: redirect browsers, reject API calls."""

import enum
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from ministry_hub.core.config import get_settings
from ministry_hub.core.security import Role
from ministry_hub.services.identity import Identity, resolve_identity

if TYPE_CHECKING:
    from ministry_hub.core.config import Settings

logger = logging.getLogger(__name__)


class GuardDecision(enum.Enum):
    ALLOW = "allow"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


def _normalize_prefix(prefix: str) -> str:
    prefix = "/" + prefix.strip().strip("/")
    return prefix


class RouteGuard:
    """Role check for requests whose path falls under one of the protected prefixes."""

    def __init__(
        self,
        prefixes: Iterable[str],
        *,
        login_path: str = "/login",
        required_role: Role = Role.ADMIN,
    ) -> None:
        self.prefixes = tuple(_normalize_prefix(p) for p in prefixes if p.strip())
        self.login_path = login_path
        self.required_role = required_role

    def is_protected(self, path: str) -> bool:
        """Whole-segment match: '/admin' covers '/admin' and '/admin/x', not '/administrator'."""
        return any(path == p or path.startswith(p + "/") for p in self.prefixes)

    def check(self, path: str, identity: Identity | None) -> GuardDecision:
        if not self.is_protected(path):
            return GuardDecision.ALLOW
        if identity is None:
            return GuardDecision.UNAUTHENTICATED
        if identity.role is not self.required_role:
            return GuardDecision.FORBIDDEN
        return GuardDecision.ALLOW

    def login_redirect_url(self, path: str) -> str:
        return f"{self.login_path}?{urlencode({'callbackUrl': path})}"


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """
    Applies RouteGuard before any handler runs.

    API paths (under API_PREFIX) get 401/403 JSON; everything else is a
    browser navigation and is redirected to the login page.
    """

    def __init__(self, app, guard: RouteGuard, settings: "Settings | None" = None) -> None:
        super().__init__(app)
        self.guard = guard
        self._settings = settings

    @property
    def settings(self) -> "Settings":
        return self._settings or get_settings()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if request.method == "OPTIONS" or not self.guard.is_protected(path):
            return await call_next(request)

        identity = resolve_identity(request, self.settings)
        decision = self.guard.check(path, identity)
        if decision is GuardDecision.ALLOW:
            request.state.identity = identity
            return await call_next(request)

        logger.info(
            "Route guard denied request",
            extra={"path": path, "decision": decision.value, "user_id": identity.id if identity else None},
        )
        api_prefix = self.settings.API_PREFIX
        if path == api_prefix or path.startswith(api_prefix + "/"):
            if decision is GuardDecision.UNAUTHENTICATED:
                return JSONResponse({"error": "Not authenticated"}, status_code=401)
            return JSONResponse({"error": "Admin access required"}, status_code=403)
        return RedirectResponse(self.guard.login_redirect_url(path), status_code=307)
