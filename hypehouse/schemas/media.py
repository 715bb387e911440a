from typing import Optional

from pydantic import BaseModel


class MediaUploadResult(BaseModel):
    """Outcome for one file of an upload batch."""
    filename: str
    success: bool
    path: Optional[str] = None
    url: Optional[str] = None
    error: Optional[str] = None


class MediaUploadResponse(BaseModel):
    uploaded: int
    failed: int
    results: list[MediaUploadResult]
