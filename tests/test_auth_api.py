"""Tests for cookie login/logout/me and the guarded admin API."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError

from ministry_hub.core.database import engine
from ministry_hub.core.security import hash_password
from ministry_hub.main import app
from ministry_hub.models import User
from tests.support import add_user, reset_database


class TestLogin(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        reset_database()
        add_user("admin@example.org", "s3cret-pass", role="admin")
        add_user("member@example.org", "s3cret-pass", role="user")

    def setUp(self) -> None:
        self.client = TestClient(app, follow_redirects=False)

    def test_missing_credentials_is_400(self) -> None:
        r = self.client.post("/api/auth/login", json={"email": "admin@example.org"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Email and password are required"})

    def test_wrong_password_is_401_without_cookie(self) -> None:
        r = self.client.post("/api/auth/login", json={"email": "admin@example.org", "password": "wrong"})
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json(), {"error": "Invalid email or password"})
        self.assertNotIn("set-cookie", r.headers)

    def test_unknown_email_gets_same_401(self) -> None:
        r = self.client.post("/api/auth/login", json={"email": "nobody@example.org", "password": "x"})
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json(), {"error": "Invalid email or password"})

    def test_login_sets_http_only_cookie(self) -> None:
        r = self.client.post("/api/auth/login", json={"email": "Admin@Example.org", "password": "s3cret-pass"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["message"], "Login successful")
        self.assertEqual(r.json()["user"]["email"], "admin@example.org")
        cookie = r.headers["set-cookie"]
        self.assertIn("auth-token=", cookie)
        self.assertIn("HttpOnly", cookie)
        self.assertIn("Max-Age=604800", cookie)
        self.assertIn("SameSite=lax", cookie)

    def test_me_and_logout(self) -> None:
        self.assertEqual(self.client.get("/api/auth/me").status_code, 401)
        self.client.post("/api/auth/login", json={"email": "admin@example.org", "password": "s3cret-pass"})
        r = self.client.get("/api/auth/me")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["user"]["role"], "admin")

        r = self.client.post("/api/auth/logout")
        self.assertEqual(r.status_code, 200)
        self.assertIn("Max-Age=0", r.headers["set-cookie"])
        self.assertEqual(self.client.get("/api/auth/me").status_code, 401)


class TestStoredRole(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()

    def test_role_outside_the_set_is_rejected_by_the_database(self) -> None:
        with self.assertRaises(IntegrityError):
            add_user("editor@example.org", "s3cret-pass", role="editor")

    def test_login_with_unrecognised_stored_role_is_401(self) -> None:
        # A row written while the check constraint is not enforced.
        with engine.begin() as conn:
            conn.exec_driver_sql("PRAGMA ignore_check_constraints = ON")
            try:
                conn.execute(
                    insert(User).values(
                        email="editor@example.org",
                        password_hash=hash_password("s3cret-pass"),
                        role="editor",
                    )
                )
            finally:
                conn.exec_driver_sql("PRAGMA ignore_check_constraints = OFF")

        r = TestClient(app).post(
            "/api/auth/login", json={"email": "editor@example.org", "password": "s3cret-pass"}
        )
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json(), {"error": "Invalid email or password"})
        self.assertNotIn("set-cookie", r.headers)


class TestGuardedAdminApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        reset_database()
        add_user("admin@example.org", "s3cret-pass", role="admin")
        add_user("member@example.org", "s3cret-pass", role="user")

    def _login(self, email: str) -> TestClient:
        client = TestClient(app, follow_redirects=False)
        r = client.post("/api/auth/login", json={"email": email, "password": "s3cret-pass"})
        self.assertEqual(r.status_code, 200)
        return client

    def test_anonymous_is_401(self) -> None:
        r = TestClient(app).get("/api/admin/dashboard")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json(), {"error": "Not authenticated"})

    def test_non_admin_is_403(self) -> None:
        r = self._login("member@example.org").get("/api/admin/users")
        self.assertEqual(r.status_code, 403)
        self.assertEqual(r.json(), {"error": "Admin access required"})

    def test_admin_sees_users_without_hashes(self) -> None:
        r = self._login("admin@example.org").get("/api/admin/users")
        self.assertEqual(r.status_code, 200)
        users = r.json()["users"]
        self.assertEqual({u["email"] for u in users}, {"admin@example.org", "member@example.org"})
        self.assertTrue(all(set(u) == {"id", "email", "role"} for u in users))

    def test_admin_dashboard_and_recent_members(self) -> None:
        client = self._login("admin@example.org")
        r = client.get("/api/admin/dashboard")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["churches"], 0)
        r = client.get("/api/admin/members/recent")
        self.assertEqual(r.json(), {"data": [], "count": 0})

    def test_dashboard_page_redirects_to_login(self) -> None:
        r = TestClient(app, follow_redirects=False).get("/dashboard/members")
        self.assertEqual(r.status_code, 307)
        self.assertEqual(r.headers["location"], "/login?callbackUrl=%2Fdashboard%2Fmembers")


if __name__ == "__main__":
    unittest.main()
