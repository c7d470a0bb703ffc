"""Authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from slowapi.util import get_remote_address

from aimee.config import settings
from aimee.services.auth import (
    RequireAuth,
    User,
    authenticate_user,
    create_access_token,
    token_lifetime,
)

from ._common import limiter

router = APIRouter()


class Token(BaseModel):
    """Token response model."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


def _login_rate_limit() -> str:
    return f"{settings.auth_rate_limit_per_minute}/minute"


@router.post("/token", response_model=Token)
@limiter.limit(_login_rate_limit)
async def login_token(
    request: Request,  # Required for rate limiting
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
) -> Token:
    """Exchange the operator username and password for a bearer token."""
    ip_address = get_remote_address(request)

    user = authenticate_user(form_data.username, form_data.password, ip_address)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    lifetime = token_lifetime()
    access_token = create_access_token(data={"sub": user.id}, expires_delta=lifetime)
    return Token(access_token=access_token, expires_in=int(lifetime.total_seconds()))


@router.get("/me", response_model=User)
async def get_current_user_info(current_user: RequireAuth) -> User:
    """Get the current authenticated user's information."""
    return current_user
