"""Tests for the upload, presign, delete and image proxy endpoints with a mocked bucket."""

import io
import unittest
from unittest.mock import MagicMock, patch

import httpx
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient

from ministry_hub.api.deps import get_storage
from ministry_hub.core.config import get_settings
from ministry_hub.main import app
from ministry_hub.services.storage import StorageGateway
from ministry_hub.services.upload_guard import UploadRateLimiter

PNG = ("photo.png", b"\x89PNG\r\n\x1a\n fake image", "image/png")


class StorageApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.s3 = MagicMock()
        self.gateway = StorageGateway(self.s3, "media", "https://fly.storage.tigris.dev")
        app.dependency_overrides[get_storage] = lambda: self.gateway
        self.addCleanup(app.dependency_overrides.clear)
        original_limiter = app.state.upload_limiter
        app.state.upload_limiter = UploadRateLimiter(10)
        self.addCleanup(setattr, app.state, "upload_limiter", original_limiter)
        self.client = TestClient(app)


class TestUpload(StorageApiTestCase):
    def test_upload_stores_under_random_name(self) -> None:
        r = self.client.post("/api/upload", files={"file": PNG}, data={"folder": "members"})
        self.assertEqual(r.status_code, 200)
        data = r.json()["data"]
        self.assertTrue(r.json()["success"])
        self.assertRegex(data["key"], r"^members/\d+-[0-9a-f]{32}\.png$")
        self.assertEqual(data["originalName"], "photo.png")
        self.assertEqual(data["type"], "image/png")
        self.assertEqual(data["size"], len(PNG[1]))
        self.assertEqual(data["url"], f"https://fly.storage.tigris.dev/media/{data['key']}")
        _, kwargs = self.s3.put_object.call_args
        self.assertEqual(kwargs["Key"], data["key"])
        self.assertEqual(kwargs["Metadata"]["originalname"], "photo.png")

    def test_default_folder(self) -> None:
        r = self.client.post("/api/upload", files={"file": PNG})
        self.assertTrue(r.json()["data"]["key"].startswith("uploads/"))

    def test_rejected_file_is_400(self) -> None:
        r = self.client.post("/api/upload", files={"file": ("shell.php", b"<?php", "image/png")})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "File name contains invalid characters"})
        self.s3.put_object.assert_not_called()

    def test_missing_file_is_400(self) -> None:
        r = self.client.post("/api/upload", data={"folder": "x"}, files={"other": PNG})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "No file provided"})

    def test_json_body_is_400(self) -> None:
        r = self.client.post("/api/upload", json={"file": "x"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Content type must be multipart/form-data"})

    def test_eleventh_upload_in_a_minute_is_429(self) -> None:
        statuses = [self.client.post("/api/upload", files={"file": PNG}).status_code for _ in range(11)]
        self.assertEqual(statuses[:10], [200] * 10)
        self.assertEqual(statuses[10], 429)

    def test_upload_info(self) -> None:
        r = self.client.get("/api/upload")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["message"], "Upload endpoint is running")
        self.assertIn("image/png", r.json()["allowedTypes"])

    def test_storage_failure_is_500(self) -> None:
        self.s3.put_object.side_effect = ClientError({"Error": {"Code": "InternalError"}}, "PutObject")
        r = self.client.post("/api/upload", files={"file": PNG})
        self.assertEqual(r.status_code, 500)
        self.assertEqual(r.json(), {"error": "Failed to store file"})


class TestPresignAndDelete(StorageApiTestCase):
    def test_presign_clamps_to_a_day(self) -> None:
        self.s3.generate_presigned_url.return_value = "https://signed.example/k"
        r = self.client.post("/api/upload/presigned-url", json={"key": "uploads/a.png", "expiresIn": 999999})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["data"]["url"], "https://signed.example/k")
        self.assertEqual(r.json()["data"]["expiresIn"], 86400)

    def test_delete(self) -> None:
        r = self.client.request("DELETE", "/api/upload/delete", json={"key": "uploads/a.png"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"success": True, "message": "File deleted successfully"})
        self.s3.delete_object.assert_called_once_with(Bucket="media", Key="uploads/a.png")


class TestImageProxy(StorageApiTestCase):
    def test_serves_object_with_cache_headers(self) -> None:
        self.s3.get_object.return_value = {"Body": io.BytesIO(b"img"), "ContentType": "image/png"}
        r = self.client.get("/api/images", params={"key": "uploads/a.png"})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.content, b"img")
        self.assertEqual(r.headers["content-type"], "image/png")
        self.assertEqual(r.headers["cache-control"], "public, max-age=31536000, immutable")

    def test_missing_object_is_404(self) -> None:
        self.s3.get_object.side_effect = ClientError({"Error": {"Code": "NoSuchKey"}}, "GetObject")
        r = self.client.get("/api/images", params={"key": "nope.png"})
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json(), {"error": "Image not found"})

    def test_requires_key_or_url(self) -> None:
        self.assertEqual(self.client.get("/api/images").status_code, 400)
        r = self.client.get("/api/images", params={"url": "file:///etc/passwd"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Invalid image URL"})

    def _fetch(self, url: str, remote: httpx.Response | None = None) -> tuple[httpx.Response, MagicMock]:
        fake_client = MagicMock()
        fake_client.__enter__.return_value.get.return_value = remote or httpx.Response(
            200, content=b"remote", headers={"content-type": "image/jpeg"}
        )
        with patch("ministry_hub.api.images.httpx.Client", return_value=fake_client) as client_cls:
            r = self.client.get("/api/images", params={"url": url})
        return r, client_cls

    def test_storage_host_url_is_fetched(self) -> None:
        r, client_cls = self._fetch("https://fly.storage.tigris.dev/media/uploads/a.jpg")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.content, b"remote")
        self.assertEqual(r.headers["content-type"], "image/jpeg")
        self.assertEqual(r.headers["cache-control"], "public, max-age=31536000, immutable")
        client_cls.assert_called_once()

    def test_other_hosts_are_rejected_without_fetching(self) -> None:
        for url in (
            "http://169.254.169.254/latest/meta-data/",
            "http://localhost:5432/",
            "https://cdn.example.org/a.jpg",
        ):
            with self.subTest(url=url):
                r, client_cls = self._fetch(url)
                self.assertEqual(r.status_code, 400)
                self.assertEqual(r.json(), {"error": "Image host is not allowed"})
                client_cls.assert_not_called()

    def test_configured_extra_host_is_fetched(self) -> None:
        settings = get_settings().model_copy(update={"IMAGE_PROXY_ALLOWED_HOSTS": "cdn.example.org"})
        with patch("ministry_hub.api.images.get_settings", return_value=settings):
            r, _ = self._fetch("https://CDN.example.org/a.jpg")
        self.assertEqual(r.status_code, 200)

    def test_non_image_response_is_502(self) -> None:
        remote = httpx.Response(200, content=b"<html>", headers={"content-type": "text/html"})
        r, _ = self._fetch("https://fly.storage.tigris.dev/media/page", remote)
        self.assertEqual(r.status_code, 502)
        self.assertEqual(r.json(), {"error": "Failed to fetch image"})

    def test_remote_404_is_404(self) -> None:
        r, _ = self._fetch("https://fly.storage.tigris.dev/media/gone.jpg", httpx.Response(404))
        self.assertEqual(r.status_code, 404)


class TestStorageNotConfigured(unittest.TestCase):
    def test_upload_without_storage_is_503(self) -> None:
        r = TestClient(app).get("/api/images", params={"key": "a.png"})
        self.assertEqual(r.status_code, 503)
        self.assertEqual(r.json(), {"error": "File storage is not configured"})


if __name__ == "__main__":
    unittest.main()
