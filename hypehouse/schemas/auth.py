import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class TokenResponse(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshTokenRequest(BaseModel):
    """Schema for refreshing access token."""
    refresh_token: str


class AdminSessionResponse(BaseModel):
    """The signed-in admin, used by the CMS shell to decide whether to redirect."""
    user_id: uuid.UUID
    email: EmailStr
    is_admin: bool = True
    last_login: Optional[datetime] = None
