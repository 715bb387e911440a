from fastapi import APIRouter, Depends, File, UploadFile

from hypehouse.config import get_settings
from hypehouse.core.exceptions import BadRequestException
from hypehouse.dependencies import get_admin_user
from hypehouse.schemas.media import MediaUploadResponse
from hypehouse.services.storage_service import StorageService, UploadItem

router = APIRouter(dependencies=[Depends(get_admin_user)])


@router.post(
    "",
    response_model=MediaUploadResponse,
    summary="Upload media files",
)
async def upload_media(files: list[UploadFile] = File(...)):
    """
    Upload one or more files to the public media bucket.

    Files are uploaded one at a time. Each gets its own result with either
    the public URL to paste into other forms or the reason it failed; one
    failure does not stop the rest.
    """
    if not files:
        raise BadRequestException("No files provided")

    limit = get_settings().max_upload_size_bytes
    items = []
    for upload in files:
        if upload.size is not None and upload.size > limit:
            # reported as too large by upload_many without reading the body
            content = b""
        else:
            content = await upload.read()
        items.append(UploadItem(
            filename=upload.filename or "upload",
            content=content,
            content_type=upload.content_type,
            size=upload.size,
        ))

    results = await StorageService.upload_many(items)
    uploaded = sum(1 for r in results if r.success)

    return MediaUploadResponse(
        uploaded=uploaded,
        failed=len(results) - uploaded,
        results=results,
    )
