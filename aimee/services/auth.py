"""Authentication service for the operator account and JWT tokens."""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher
from pydantic import BaseModel

from aimee.config import settings

# Security event logger
security_logger = logging.getLogger("aimee.security")

# Password hashing using pwdlib with Argon2
password_hash = PasswordHash((Argon2Hasher(),))

# OAuth2 scheme for token authentication
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)

ALGORITHM = "HS256"


class User(BaseModel):
    """Authenticated principal attached to each request."""

    id: str
    username: str


ANONYMOUS_USER = User(id="anonymous", username="anonymous")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return password_hash.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return password_hash.hash(password)


@lru_cache(maxsize=4)
def _operator_password_hash(password: str) -> str:
    return get_password_hash(password)


def token_lifetime() -> timedelta:
    return timedelta(minutes=settings.token_lifetime_minutes)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token with a unique JWT ID."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or token_lifetime())
    to_encode.update({"exp": expire, "jti": str(uuid.uuid4())})
    return jwt.encode(to_encode, settings.secret_key, algorithm=ALGORITHM)


def authenticate_user(
    username: str,
    password: str,
    ip_address: str | None = None,
) -> User | None:
    """Check credentials against the configured operator account.

    Args:
        username: Submitted username.
        password: Plain text password.
        ip_address: Client IP address for logging.

    Returns:
        User if authentication successful, None otherwise.
    """
    if username != settings.admin_username:
        security_logger.warning(
            "Failed login - unknown user: username=%s, ip=%s",
            username,
            ip_address or "unknown",
        )
        return None

    if not verify_password(password, _operator_password_hash(settings.admin_password)):
        security_logger.warning(
            "Failed login - invalid password: username=%s, ip=%s",
            username,
            ip_address or "unknown",
        )
        return None

    security_logger.info(
        "Successful login: username=%s, ip=%s",
        username,
        ip_address or "unknown",
    )
    return User(id=username, username=username)


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> User | None:
    """Get the current user from the JWT token."""
    if not token:
        return None

    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return None

    subject: str | None = payload.get("sub")
    if subject is None or subject != settings.admin_username:
        return None

    return User(id=subject, username=subject)


async def require_auth(
    user: Annotated[User | None, Depends(get_current_user)],
) -> User:
    """Require authentication - raises 401 if not authenticated.

    With authentication disabled every request runs as the anonymous user.
    """
    if not settings.auth_enabled:
        return user or ANONYMOUS_USER
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


# Type aliases for dependency injection
CurrentUser = Annotated[User | None, Depends(get_current_user)]
RequireAuth = Annotated[User, Depends(require_auth)]
