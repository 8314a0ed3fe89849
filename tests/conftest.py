"""Test environment: in-memory SQLite, a fixed signing secret, no object storage.

Set before any ministry_hub import so the cached settings and engine pick it up.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-for-unit-tests-only-0123456789"
os.environ["AUTH_ENABLED"] = "false"
os.environ["TRUST_PROXY_HEADERS"] = "false"
for _name in ("STORAGE_URL", "STORAGE_BUCKET", "STORAGE_ACCESS_KEY", "STORAGE_SECRET_KEY"):
    os.environ[_name] = ""
