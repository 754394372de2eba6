"""Authentication service implementation."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import TokenService, dummy_verify, hash_password, verify_password
from ..exceptions import (
    InvalidCredentialsError,
    UnauthorizedError,
    UserNotFoundError,
    UsernameTakenError,
)
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, SignupRequest, SignupResponse, TokenResponse
from .interfaces import IAuthService

logger = get_logger("auth")


class AuthService(IAuthService):
    """Credential store and token issuing for signup, login and refresh."""

    def __init__(self, session: AsyncSession, user_repo: UserRepository, tokens: TokenService):
        self.session = session
        self.user_repo = user_repo
        self.tokens = tokens

    async def create_account(self, username: str, password: str, email: str) -> UUID:
        """Persist a user with a hashed password and return its id."""
        if await self.user_repo.is_username_taken(username):
            raise UsernameTakenError()

        user_data = {
            "username": username,
            "email": email,
            "password_hash": hash_password(password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
            await self.session.commit()
        except IntegrityError as e:
            # lost a race against a concurrent signup for the same name
            await self.session.rollback()
            raise UsernameTakenError() from e

        logger.info("User created", extra={"user_id": str(user.id)})
        return user.id

    async def verify_credentials(self, username: str, password: str) -> User:
        user = await self.user_repo.get_by_username(username)
        if user is None:
            dummy_verify()
            raise UserNotFoundError("No user found.")

        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        return user

    async def signup(self, request: SignupRequest) -> SignupResponse:
        user_id = await self.create_account(request.username, request.password, str(request.email))
        return SignupResponse(message="User created successfully!", user_id=user_id)

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Verify credentials and hand out an access/refresh token pair.

        Unknown usernames and wrong passwords produce the same error so the
        response doesn't reveal which one it was.
        """
        try:
            user = await self.verify_credentials(request.username, request.password)
        except (UserNotFoundError, InvalidCredentialsError) as e:
            logger.info("Failed login", extra={"reason": type(e).__name__})
            raise InvalidCredentialsError() from e

        return TokenResponse(
            access_token=self.tokens.issue_access_token(user.id),
            refresh_token=self.tokens.issue_refresh_token(user.id),
        )

    async def refresh(self, refresh_token: str) -> str:
        if not refresh_token:
            raise UnauthorizedError("Refresh token is required.")

        user_id = self.tokens.verify_refresh_token(refresh_token)
        if not await self.user_repo.exists(user_id):
            raise UnauthorizedError("Invalid refresh token.")

        return self.tokens.refresh_access_token(refresh_token)
