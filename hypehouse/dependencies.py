from typing import Annotated

from fastapi import Depends, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from hypehouse.database import get_db, bind_identity
from hypehouse.models.user import User
from hypehouse.core.security import verify_access_token
from hypehouse.core.exceptions import BadRequestException, UnauthorizedException, ForbiddenException
from hypehouse.services.auth_service import AuthService

# OAuth2 scheme for extracting bearer tokens; missing tokens are handled below
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/admin/login", auto_error=False)


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)]
) -> User:
    """
    Dependency that resolves the bearer token to an active user.

    A missing, expired or malformed token, or a token for a user that no
    longer exists, is treated as anonymous and answered with 401.
    """
    if token is None:
        raise UnauthorizedException("Not authenticated")

    user_id = verify_access_token(token)
    if user_id is None:
        raise UnauthorizedException()

    # Bind before the first query so row-level policies see the caller
    await bind_identity(db, user_id)

    user = await AuthService.get_active_user(db, user_id)
    if user is None:
        raise UnauthorizedException()

    return user


async def get_admin_user(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)]
) -> User:
    """
    Dependency that gates every admin route except login.

    Usage:
        @router.post("/artists")
        async def create_artist(admin: AdminUser, ...):
            ...
    """
    if not await AuthService.is_admin(db, current_user.id):
        raise ForbiddenException()
    return current_user


def require_confirmation(confirm: bool = Query(False, description="Must be true to delete")) -> None:
    """Deletes are irreversible; the client has to confirm explicitly."""
    if not confirm:
        raise BadRequestException("Deletion must be confirmed with ?confirm=true")


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
AdminUser = Annotated[User, Depends(get_admin_user)]
