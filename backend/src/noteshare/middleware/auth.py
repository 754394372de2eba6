"""Authorization gate: every note endpoint goes through here first."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import UnauthorizedError
from ..core.logging import get_logger
from ..core.models.user import User
from ..core.repositories.user_repository import UserRepository
from ..database import get_db_session
from ..security import TokenService, get_token_service

logger = get_logger("auth.gate")


class JWTBearer(HTTPBearer):
    """Pulls the raw token out of ``Authorization: Bearer <jwt>``.

    Missing headers and other schemes are answered with 401 through the
    app's error handlers instead of FastAPI's default 403.
    """

    def __init__(self):
        super().__init__(auto_error=False, description="JWT access token")

    async def __call__(self, request: Request) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if credentials is None or not credentials.credentials:
            raise UnauthorizedError("Unauthorized - No token provided")
        return credentials.credentials


bearer_scheme = JWTBearer()


async def get_current_user(
    request: Request,
    token: str = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """Resolve the acting user from the access token, or reject with 401."""
    user_id = tokens.verify_access_token(token)

    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        logger.warning("Token for unknown user", extra={"user_id": str(user_id)})
        raise UnauthorizedError("Unauthorized - User no longer exists")

    request.state.user_id = user.id
    return user


async def get_current_user_id(user: User = Depends(get_current_user)) -> UUID:
    """Get current authenticated user ID."""
    return user.id
