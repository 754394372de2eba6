"""Authentication API endpoints."""

from typing import Optional

from fastapi import APIRouter, Body, Cookie, Depends, Response

from ..config import Settings, get_settings
from ..core.schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
)
from ..core.services import AuthService
from .deps import get_auth_service

router = APIRouter(prefix="/auth", tags=["authentication"])

REFRESH_COOKIE = "refreshToken"


@router.post("/signup", response_model=SignupResponse)
async def signup(request: SignupRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Create a new user account."""
    return await auth_service.signup(request)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """Login user; returns both tokens and sets the refresh token cookie."""
    tokens = await auth_service.login(request)
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=tokens.refresh_token,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        max_age=auth_service.tokens.refresh_token_ttl_seconds,
    )
    return tokens


@router.post("/refresh-token", response_model=AccessTokenResponse)
async def refresh_token(
    request: Optional[RefreshTokenRequest] = Body(default=None),
    cookie_token: Optional[str] = Cookie(default=None, alias=REFRESH_COOKIE),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Get a new access token from a refresh token (body or cookie)."""
    token = (request.refresh_token if request else None) or cookie_token
    access_token = await auth_service.refresh(token or "")
    return AccessTokenResponse(access_token=access_token)
