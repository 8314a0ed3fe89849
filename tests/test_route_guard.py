"""Unit tests for identity resolution and the protected-prefix route guard."""

import unittest
from unittest.mock import MagicMock

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from ministry_hub.core.config import get_settings
from ministry_hub.core.security import Role, issue_token
from ministry_hub.services.identity import Identity, resolve_identity
from ministry_hub.services.route_guard import GuardDecision, RouteGuard, RouteGuardMiddleware

ADMIN = Identity(id=1, email="admin@example.org", role=Role.ADMIN)
USER = Identity(id=2, email="user@example.org", role=Role.USER)


def _request(cookies: dict | None = None, headers: dict | None = None) -> MagicMock:
    request = MagicMock()
    request.cookies = cookies or {}
    request.headers = headers or {}
    return request


class TestResolveIdentity(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = get_settings()

    def test_valid_cookie(self) -> None:
        token = issue_token(5, "pastor@example.org", "admin")
        identity = resolve_identity(_request(cookies={"auth-token": token}), self.settings)
        self.assertEqual(identity, Identity(id=5, email="pastor@example.org", role=Role.ADMIN))

    def test_no_cookie_and_untrusted_headers(self) -> None:
        headers = {"x-user-id": "9", "x-user-email": "x@example.org", "x-user-role": "admin"}
        self.assertIsNone(resolve_identity(_request(headers=headers), self.settings))

    def test_trusted_headers(self) -> None:
        settings = self.settings.model_copy(update={"TRUST_PROXY_HEADERS": True})
        headers = {"x-user-id": "9", "x-user-email": "x@example.org", "x-user-role": "user"}
        identity = resolve_identity(_request(headers=headers), settings)
        self.assertEqual(identity, Identity(id=9, email="x@example.org", role=Role.USER))

    def test_trusted_headers_with_bad_values(self) -> None:
        settings = self.settings.model_copy(update={"TRUST_PROXY_HEADERS": True})
        for headers in (
            {"x-user-id": "abc", "x-user-email": "x@example.org", "x-user-role": "admin"},
            {"x-user-id": "9", "x-user-email": "x@example.org", "x-user-role": "owner"},
            {"x-user-id": "9", "x-user-role": "admin"},
        ):
            with self.subTest(headers=headers):
                self.assertIsNone(resolve_identity(_request(headers=headers), settings))

    def test_invalid_cookie_is_ignored(self) -> None:
        self.assertIsNone(resolve_identity(_request(cookies={"auth-token": "garbage"}), self.settings))


class TestRouteGuard(unittest.TestCase):
    def setUp(self) -> None:
        self.guard = RouteGuard(["/admin", "/dashboard/", "/api/admin"])

    def test_prefix_matching_is_whole_segment(self) -> None:
        self.assertTrue(self.guard.is_protected("/admin"))
        self.assertTrue(self.guard.is_protected("/admin/members"))
        self.assertTrue(self.guard.is_protected("/dashboard"))
        self.assertTrue(self.guard.is_protected("/api/admin/users"))
        self.assertFalse(self.guard.is_protected("/administrator"))
        self.assertFalse(self.guard.is_protected("/api/churches"))
        self.assertFalse(self.guard.is_protected("/"))

    def test_decisions(self) -> None:
        self.assertIs(self.guard.check("/api/churches", None), GuardDecision.ALLOW)
        self.assertIs(self.guard.check("/admin", None), GuardDecision.UNAUTHENTICATED)
        self.assertIs(self.guard.check("/admin", USER), GuardDecision.FORBIDDEN)
        self.assertIs(self.guard.check("/admin", ADMIN), GuardDecision.ALLOW)

    def test_login_redirect_keeps_callback(self) -> None:
        self.assertEqual(
            self.guard.login_redirect_url("/admin/members"),
            "/login?callbackUrl=%2Fadmin%2Fmembers",
        )


def _guarded_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RouteGuardMiddleware, guard=RouteGuard(["/admin", "/api/admin"]))

    @app.get("/admin")
    def admin_page(request: Request) -> dict:
        return {"email": request.state.identity.email}

    @app.get("/api/admin/stats")
    def admin_api() -> dict:
        return {"ok": True}

    @app.get("/public")
    def public() -> dict:
        return {"ok": True}

    return app


class TestRouteGuardMiddleware(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(_guarded_app(), follow_redirects=False)

    def test_public_path_passes(self) -> None:
        self.assertEqual(self.client.get("/public").status_code, 200)

    def test_browser_path_redirects_to_login(self) -> None:
        r = self.client.get("/admin")
        self.assertEqual(r.status_code, 307)
        self.assertEqual(r.headers["location"], "/login?callbackUrl=%2Fadmin")

    def test_api_path_without_session_is_401(self) -> None:
        r = self.client.get("/api/admin/stats")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json(), {"error": "Not authenticated"})

    def test_api_path_with_user_role_is_403(self) -> None:
        self.client.cookies.set("auth-token", issue_token(2, "user@example.org", "user"))
        r = self.client.get("/api/admin/stats")
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.json(), {"error": "Admin access required"})

    def test_admin_passes_and_identity_is_attached(self) -> None:
        self.client.cookies.set("auth-token", issue_token(1, "admin@example.org", "admin"))
        r = self.client.get("/admin")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"email": "admin@example.org"})


if __name__ == "__main__":
    unittest.main()
