"""Field types shared by the admin and public schemas."""

from typing import Annotated, Any, Optional
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, BeforeValidator, StringConstraints


def blank_to_none(value: Any) -> Any:
    """Form inputs send "" for untouched optional fields; store those as NULL."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def require_absolute_url(value: str) -> str:
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("Please enter a valid URL")
    return value


# Optional free text (bios, descriptions, notes)
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]

# Optional link or media URL as typed into the admin forms
OptionalLink = Annotated[
    Optional[Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]],
    BeforeValidator(blank_to_none),
]

# Absolute URL (scheme + host), max 500 chars
AbsoluteUrl = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=500),
    AfterValidator(require_absolute_url),
]


class MessageResponse(BaseModel):
    """Generic message response."""
    message: str


class SubmissionResult(BaseModel):
    """Outcome of a public submission. Carries no row data."""
    success: bool
    message: str
