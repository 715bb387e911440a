import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from hypehouse.config import get_settings

settings = get_settings()

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a password against its hash."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def _encode(subject: str, token_type: str, expire: datetime) -> str:
    to_encode = {
        "sub": subject,
        "exp": expire,
        "type": token_type,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        subject: The user id to encode in the token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT access token
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    return _encode(subject, "access", expire)


def create_refresh_token(subject: str) -> str:
    """Create a JWT refresh token for the given user id."""
    expire = datetime.now(timezone.utc) + timedelta(days=settings.refresh_token_expire_days)
    return _encode(subject, "refresh", expire)


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
        return payload
    except JWTError:
        return None


def _subject_user_id(token: str, token_type: str) -> Optional[uuid.UUID]:
    payload = decode_token(token)
    if payload is None or payload.get("type") != token_type:
        return None

    try:
        return uuid.UUID(str(payload.get("sub")))
    except ValueError:
        return None


def verify_access_token(token: str) -> Optional[uuid.UUID]:
    """
    Verify an access token and return the user id it was issued for.

    Returns:
        The user id if valid, None otherwise
    """
    return _subject_user_id(token, "access")


def verify_refresh_token(token: str) -> Optional[uuid.UUID]:
    """Verify a refresh token and return the user id, or None."""
    return _subject_user_id(token, "refresh")
