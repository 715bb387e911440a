from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from hypehouse.schemas.auth import (
    TokenResponse,
    RefreshTokenRequest,
    AdminSessionResponse,
)
from hypehouse.core.security import (
    create_access_token,
    create_refresh_token,
    verify_refresh_token,
)
from hypehouse.core.exceptions import UnauthorizedException
from hypehouse.database import bind_identity
from hypehouse.dependencies import AdminUser, DbSession
from hypehouse.services.auth_service import AuthService

router = APIRouter()

# One message for every rejected login so the response never reveals
# whether the account exists or merely lacks the admin role.
INVALID_CREDENTIALS = "Invalid credentials"


def _issue_tokens(subject: str) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(subject=subject),
        refresh_token=create_refresh_token(subject=subject),
    )


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Admin login",
)
async def login(
    db: DbSession,
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    """
    Authenticate an admin and return JWT tokens.

    Uses OAuth2 password flow:
    - **username**: The admin's email address
    - **password**: The admin's password
    """
    user = await AuthService.authenticate_admin(db, form_data.username, form_data.password)
    if user is None:
        raise UnauthorizedException(INVALID_CREDENTIALS)

    return _issue_tokens(str(user.id))


@router.post(
    "/refresh",
    response_model=TokenResponse,
    summary="Refresh access token",
)
async def refresh_token(request: RefreshTokenRequest, db: DbSession):
    """
    Get a new token pair using a refresh token.

    The admin role is checked again, so revoking it ends the session at
    the next refresh.
    """
    user_id = verify_refresh_token(request.refresh_token)
    if user_id is None:
        raise UnauthorizedException("Invalid or expired refresh token")

    await bind_identity(db, user_id)
    user = await AuthService.get_active_user(db, user_id)
    if user is None or not await AuthService.is_admin(db, user.id):
        raise UnauthorizedException("Invalid or expired refresh token")

    return _issue_tokens(str(user.id))


@router.get(
    "/session",
    response_model=AdminSessionResponse,
    summary="Current admin session",
)
async def get_session(admin: AdminUser):
    """
    Return the signed-in admin.

    The CMS calls this before rendering any admin screen; a 401/403 answer
    means it should send the visitor to the login page.
    """
    return AdminSessionResponse(
        user_id=admin.id,
        email=admin.email,
        last_login=admin.last_login,
    )
