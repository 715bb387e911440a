import logging
import os
import secrets
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from hypehouse.config import get_settings
from hypehouse.schemas.media import MediaUploadResult
from hypehouse.services.http_client import get_http_client

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "bin"


class StorageError(Exception):
    """A storage request failed or storage is not configured."""


@dataclass
class UploadItem:
    filename: str
    content: bytes
    content_type: Optional[str] = None
    # size reported by the client; set when content was never read
    size: Optional[int] = None


def build_storage_key(
    filename: str,
    now_ms: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """
    Object key for an upload: `uploads/<epoch-millis>-<random-token>.<ext>`.

    The original filename only contributes its extension.
    """
    settings = get_settings()
    _, ext = os.path.splitext(filename)
    ext = ext.lstrip(".").lower() or DEFAULT_EXTENSION
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if token is None:
        token = secrets.token_hex(4)
    return f"{settings.media_upload_prefix}/{now_ms}-{token}.{ext}"


class StorageService:
    """Service for Supabase Storage operations on the public media bucket."""

    @staticmethod
    def public_url(path: str) -> str:
        settings = get_settings()
        return f"{settings.supabase_url}/storage/v1/object/public/{settings.supabase_bucket_media}/{path}"

    @staticmethod
    async def upload(path: str, content: bytes, content_type: Optional[str] = None) -> str:
        """
        Upload one object to the media bucket and return its public URL.

        Raises:
            StorageError: storage is not configured or rejected the upload
        """
        settings = get_settings()

        if not settings.supabase_url:
            raise StorageError("Storage service not configured")

        storage_key = settings.storage_key
        if not storage_key:
            raise StorageError("Storage service not configured")

        client = get_http_client()
        url = f"{settings.supabase_url}/storage/v1/object/{settings.supabase_bucket_media}/{path}"
        logger.info(f"[StorageService] Uploading {path} ({len(content)} bytes)")

        try:
            response = await client.post(
                url,
                content=content,
                headers={
                    "Authorization": f"Bearer {storage_key}",
                    "apikey": storage_key,
                    "Content-Type": content_type or "application/octet-stream",
                    "x-upsert": "false",
                },
            )
        except httpx.HTTPError as e:
            raise StorageError(f"Storage request failed: {type(e).__name__}: {e}") from e

        if response.status_code not in (200, 201):
            logger.warning(f"[StorageService] Upload of {path} failed, status: {response.status_code}")
            raise StorageError(_error_message(response))

        return StorageService.public_url(path)

    @staticmethod
    async def upload_many(items: list[UploadItem]) -> list[MediaUploadResult]:
        """
        Upload files one after another.

        A failing file is reported in its own result and does not stop
        the rest of the batch.
        """
        settings = get_settings()
        results: list[MediaUploadResult] = []

        for item in items:
            size = item.size if item.size is not None else len(item.content)
            if size > settings.max_upload_size_bytes:
                results.append(MediaUploadResult(
                    filename=item.filename,
                    success=False,
                    error=f"File too large. Maximum size: {settings.max_upload_size_mb}MB",
                ))
                continue

            if not item.content:
                results.append(MediaUploadResult(
                    filename=item.filename, success=False, error="File is empty",
                ))
                continue

            path = build_storage_key(item.filename)
            try:
                url = await StorageService.upload(path, item.content, item.content_type)
            except StorageError as e:
                logger.error(f"[StorageService] Failed to upload {item.filename}: {e}")
                results.append(MediaUploadResult(
                    filename=item.filename, success=False, error=str(e),
                ))
                continue

            results.append(MediaUploadResult(
                filename=item.filename, success=True, path=path, url=url,
            ))

        return results


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    return f"Failed to upload: {response.text[:200] or response.status_code}"
