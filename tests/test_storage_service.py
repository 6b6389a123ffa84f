"""
Image upload helper and endpoint. The S3 client is always mocked.
"""
import io
import re
from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from app.config import settings
from app.main import app
from app.services.storage_service import ImageValidationError, StorageService, get_storage_service

MB = 1024 * 1024


class TestImageUpload:
    @pytest.fixture
    def s3_client(self):
        return Mock()

    @pytest.fixture
    def storage(self, s3_client):
        return StorageService(s3_client=s3_client, max_size_mb=5)

    @pytest.fixture(autouse=True)
    def public_bucket_url(self, monkeypatch):
        monkeypatch.setattr(settings, "R2_BUCKET_URL", "https://cdn.example.com")
        monkeypatch.setattr(settings, "R2_ENDPOINT_URL", "https://account.r2.cloudflarestorage.com")

    def test_oversized_file_rejected_before_upload(self, storage, s3_client):
        """10MB against a 5MB ceiling: no storage call, no callback"""
        callback = Mock()
        with pytest.raises(ImageValidationError) as exc_info:
            storage.upload_image(b"x" * (10 * MB), "big.png", "image/png", 10 * MB, on_uploaded=callback)

        assert "5 MB" in str(exc_info.value)
        s3_client.upload_fileobj.assert_not_called()
        callback.assert_not_called()

    def test_non_image_rejected(self, storage, s3_client):
        with pytest.raises(ImageValidationError):
            storage.upload_image(b"%PDF", "doc.pdf", "application/pdf", 4)
        s3_client.upload_fileobj.assert_not_called()

    def test_exactly_at_ceiling_is_allowed(self, storage, s3_client):
        storage.upload_image(b"x", "photo.jpg", "image/jpeg", 5 * MB)
        s3_client.upload_fileobj.assert_called_once()

    def test_upload_returns_public_url_and_calls_back(self, storage, s3_client):
        callback = Mock()
        url = storage.upload_image(b"\x89PNG", "Campus.PNG", "image/png", 4, on_uploaded=callback)

        args, kwargs = s3_client.upload_fileobj.call_args
        bucket, key = args[1], args[2]
        assert bucket == settings.R2_BUCKET_NAME
        assert kwargs["ExtraArgs"] == {"ContentType": "image/png"}
        assert url == f"https://cdn.example.com/{key}"
        callback.assert_called_once_with(url)

    def test_named_bucket(self, storage, s3_client):
        url = storage.upload_image(b"img", "a.webp", "image/webp", 3, bucket="university-images")
        assert s3_client.upload_fileobj.call_args[0][1] == "university-images"
        assert url.startswith("https://account.r2.cloudflarestorage.com/university-images/")

    def test_storage_failure_propagates_without_callback(self, storage, s3_client):
        s3_client.upload_fileobj.side_effect = ClientError({"Error": {"Code": "500"}}, "PutObject")
        callback = Mock()
        with pytest.raises(ClientError):
            storage.upload_image(b"img", "a.png", "image/png", 3, on_uploaded=callback)
        callback.assert_not_called()

    def test_generated_filenames(self):
        first = StorageService.generate_filename("photo.JPG")
        second = StorageService.generate_filename("photo.JPG")
        assert re.fullmatch(r"\d{13}-[0-9a-z]{11}\.jpg", first)
        assert first != second
        assert re.fullmatch(r"\d{13}-[0-9a-z]{11}", StorageService.generate_filename("noext"))


class TestUploadEndpoint:
    @pytest.fixture
    def s3_client(self, monkeypatch):
        monkeypatch.setattr(settings, "R2_BUCKET_URL", "https://cdn.example.com")
        s3_client = Mock()
        app.dependency_overrides[get_storage_service] = lambda: StorageService(s3_client=s3_client, max_size_mb=1)
        yield s3_client
        app.dependency_overrides.pop(get_storage_service, None)

    def test_upload(self, client, auth_headers, s3_client):
        response = client.post(
            "/api/admin/uploads/images",
            files={"file": ("logo.png", io.BytesIO(b"\x89PNG data"), "image/png")},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["url"].startswith("https://cdn.example.com/")
        s3_client.upload_fileobj.assert_called_once()

    def test_too_large(self, client, auth_headers, s3_client):
        response = client.post(
            "/api/admin/uploads/images",
            files={"file": ("big.png", io.BytesIO(b"x" * (2 * MB)), "image/png")},
            headers=auth_headers,
        )
        assert response.status_code == 400
        s3_client.upload_fileobj.assert_not_called()

    def test_not_an_image(self, client, auth_headers, s3_client):
        response = client.post(
            "/api/admin/uploads/images",
            files={"file": ("notes.txt", io.BytesIO(b"hello"), "text/plain")},
            headers=auth_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "The file must be an image"

    def test_requires_admin(self, client, s3_client):
        response = client.post(
            "/api/admin/uploads/images",
            files={"file": ("logo.png", io.BytesIO(b"\x89PNG"), "image/png")},
        )
        assert response.status_code == 401
        s3_client.upload_fileobj.assert_not_called()
