"""
Unit tests for blob storage backends (Supabase REST and local filesystem).
"""
import httpx
import pytest
from webcam_capture.domain.exceptions import StorageWriteError
from webcam_capture.infrastructure.storage.local_storage import LocalImageStorage
from webcam_capture.infrastructure.storage.supabase_storage import SupabaseImageStorage

KEY = "summit-cam/2025-01-15T15-30-00-123Z.jpg"


def _supabase(handler, service_key="service-key", base_url="https://project.supabase.co/") -> SupabaseImageStorage:
    return SupabaseImageStorage(
        base_url=base_url,
        service_key=service_key,
        bucket="webcam-snapshots",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


class TestSupabaseImageStorage:
    """Tests for SupabaseImageStorage"""

    @pytest.mark.asyncio
    async def test_upload_request(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = request.content
            return httpx.Response(200, json={"Key": f"webcam-snapshots/{KEY}"})

        storage = _supabase(handler)
        await storage.upload(KEY, b"jpeg-bytes", content_type="image/jpeg", cache_control="3600")

        assert seen["method"] == "POST"
        assert seen["url"] == f"https://project.supabase.co/storage/v1/object/webcam-snapshots/{KEY}"
        assert seen["headers"]["authorization"] == "Bearer service-key"
        assert seen["headers"]["content-type"] == "image/jpeg"
        assert seen["headers"]["cache-control"] == "max-age=3600"
        assert seen["headers"]["x-upsert"] == "false"
        assert seen["body"] == b"jpeg-bytes"

    @pytest.mark.asyncio
    async def test_rejected_upload_raises(self):
        storage = _supabase(lambda request: httpx.Response(409, json={"error": "Duplicate"}))
        with pytest.raises(StorageWriteError) as exc_info:
            await storage.upload(KEY, b"x", content_type="image/jpeg", cache_control="3600")
        assert exc_info.value.reason == "storage_write_failed"

    @pytest.mark.asyncio
    async def test_network_error_raises(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(StorageWriteError):
            await _supabase(handler).upload(KEY, b"x", content_type="image/jpeg", cache_control="3600")

    @pytest.mark.asyncio
    async def test_unconfigured_never_sends(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200)

        with pytest.raises(StorageWriteError):
            await _supabase(handler, service_key=None).upload(
                KEY, b"x", content_type="image/jpeg", cache_control="3600"
            )
        assert requests == []

    def test_public_url(self):
        storage = _supabase(lambda request: httpx.Response(200))
        assert storage.get_public_url(KEY) == (
            f"https://project.supabase.co/storage/v1/object/public/webcam-snapshots/{KEY}"
        )


class TestLocalImageStorage:
    """Tests for LocalImageStorage"""

    @pytest.mark.asyncio
    async def test_upload_writes_file(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), "http://localhost:8000/")
        await storage.upload(KEY, b"jpeg-bytes", content_type="image/jpeg", cache_control="3600")
        assert (tmp_path / KEY).read_bytes() == b"jpeg-bytes"

    @pytest.mark.asyncio
    async def test_existing_key_not_overwritten(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), "http://localhost:8000")
        await storage.upload(KEY, b"first", content_type="image/jpeg", cache_control="3600")
        with pytest.raises(StorageWriteError):
            await storage.upload(KEY, b"second", content_type="image/jpeg", cache_control="3600")
        assert (tmp_path / KEY).read_bytes() == b"first"

    @pytest.mark.asyncio
    async def test_key_outside_directory_rejected(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path / "media"), "http://localhost:8000")
        with pytest.raises(StorageWriteError):
            await storage.upload("../escape.jpg", b"x", content_type="image/jpeg", cache_control="3600")

    def test_public_url(self, tmp_path):
        storage = LocalImageStorage(str(tmp_path), "http://localhost:8000/")
        assert storage.get_public_url(KEY) == f"http://localhost:8000/media/{KEY}"
