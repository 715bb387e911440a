import httpx
from fastapi import status
from starlette.datastructures import UploadFile

from hypehouse.services.storage_service import StorageService, UploadItem, build_storage_key

API = "/api/v1"


class TestStorageKey:
    def test_key_format(self):
        key = build_storage_key("Cover Art.PNG", now_ms=1710532800000, token="a1b2c3d4")
        assert key == "uploads/1710532800000-a1b2c3d4.png"

    def test_missing_extension(self):
        assert build_storage_key("README", now_ms=1, token="ffff0000") == "uploads/1-ffff0000.bin"

    def test_keys_do_not_collide(self):
        assert build_storage_key("a.jpg") != build_storage_key("a.jpg")

    def test_public_url(self):
        assert StorageService.public_url("uploads/1-a.png") == (
            "https://test.supabase.co/storage/v1/object/public/media/uploads/1-a.png"
        )


class TestUploadMany:
    """Batch uploads report per-file results"""

    async def test_partial_failure(self, storage_requests):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith(".gif"):
                return httpx.Response(400, json={"message": "mime type image/gif is not supported"})
            return httpx.Response(200, json={"Key": "media/ok"})

        storage_requests["handler"] = handler

        results = await StorageService.upload_many([
            UploadItem("one.jpg", b"jpg-bytes", "image/jpeg"),
            UploadItem("two.gif", b"gif-bytes", "image/gif"),
            UploadItem("three.png", b"png-bytes", "image/png"),
        ])

        assert [r.success for r in results] == [True, False, True]
        assert results[0].url.startswith("https://test.supabase.co/storage/v1/object/public/media/uploads/")
        assert results[1].error == "mime type image/gif is not supported"
        assert results[1].url is None
        assert len(storage_requests["seen"]) == 3

        upload = storage_requests["seen"][0]
        assert upload.method == "POST"
        assert upload.headers["Authorization"] == "Bearer test-service-role-key"
        assert upload.headers["Content-Type"] == "image/jpeg"

    async def test_network_error_is_reported(self, storage_requests):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        storage_requests["handler"] = handler

        results = await StorageService.upload_many([UploadItem("one.jpg", b"bytes")])
        assert results[0].success is False
        assert "ConnectError" in results[0].error

    async def test_empty_and_oversized_files_are_not_sent(self, storage_requests):
        results = await StorageService.upload_many([
            UploadItem("empty.jpg", b""),
            UploadItem("huge.wav", b"x" * (1024 * 1024 + 1)),
            UploadItem("fine.jpg", b"ok"),
        ])
        assert [r.success for r in results] == [False, False, True]
        assert results[0].error == "File is empty"
        assert results[1].error == "File too large. Maximum size: 1MB"
        assert len(storage_requests["seen"]) == 1

    async def test_reported_size_is_checked_before_content(self, storage_requests):
        results = await StorageService.upload_many([
            UploadItem("unread.wav", b"", "audio/wav", size=1024 * 1024 + 1),
        ])
        assert results[0].error == "File too large. Maximum size: 1MB"
        assert storage_requests["seen"] == []


class TestMediaRoute:
    async def test_upload_endpoint(self, client, admin_headers, storage_requests):
        response = await client.post(
            f"{API}/admin/media",
            files=[
                ("files", ("cover.jpg", b"jpg-bytes", "image/jpeg")),
                ("files", ("empty.png", b"", "image/png")),
            ],
            headers=admin_headers,
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["uploaded"] == 1
        assert data["failed"] == 1
        assert data["results"][0]["filename"] == "cover.jpg"
        assert data["results"][0]["path"].startswith("uploads/")

    async def test_oversized_file_is_not_read(self, client, admin_headers, storage_requests, monkeypatch):
        read_files = []
        original_read = UploadFile.read

        async def tracking_read(self, *args, **kwargs):
            read_files.append(self.filename)
            return await original_read(self, *args, **kwargs)

        monkeypatch.setattr(UploadFile, "read", tracking_read)

        response = await client.post(
            f"{API}/admin/media",
            files=[
                ("files", ("master.wav", b"x" * (1024 * 1024 + 1), "audio/wav")),
                ("files", ("cover.jpg", b"jpg-bytes", "image/jpeg")),
            ],
            headers=admin_headers,
        )
        assert response.status_code == status.HTTP_200_OK
        results = response.json()["results"]
        assert results[0]["filename"] == "master.wav"
        assert results[0]["error"] == "File too large. Maximum size: 1MB"
        assert results[1]["success"] is True
        assert read_files == ["cover.jpg"]
        assert len(storage_requests["seen"]) == 1

    async def test_upload_requires_admin(self, client, user_headers, storage_requests):
        response = await client.post(
            f"{API}/admin/media",
            files=[("files", ("cover.jpg", b"jpg-bytes", "image/jpeg"))],
            headers=user_headers,
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert storage_requests["seen"] == []
