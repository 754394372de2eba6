"""JWT access/refresh token issuing and verification."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import Settings, get_settings
from ..core.exceptions import InvalidTokenError, TokenExpiredError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class TokenService:
    """Issues and validates signed, time-limited tokens.

    Access tokens are signed with ``jwt_secret`` and refresh tokens with
    ``refresh_token_secret``, so one can never be passed off as the other.
    Both carry the user id in ``sub``. Nothing is stored server-side.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def issue_access_token(self, user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
        """Create a short-lived access token for ``user_id``."""
        expires_delta = expires_delta or timedelta(
            minutes=self.settings.access_token_expire_minutes
        )
        return self._encode(
            user_id, ACCESS_TOKEN_TYPE, expires_delta, self.settings.jwt_secret
        )

    def issue_refresh_token(self, user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
        """Create a long-lived refresh token, only good for minting access tokens."""
        expires_delta = expires_delta or timedelta(days=self.settings.refresh_token_expire_days)
        return self._encode(
            user_id, REFRESH_TOKEN_TYPE, expires_delta, self.settings.refresh_token_secret
        )

    def verify_access_token(self, token: str) -> UUID:
        """Return the user id embedded in a valid access token."""
        return self._decode(token, ACCESS_TOKEN_TYPE, self.settings.jwt_secret)

    def verify_refresh_token(self, token: str) -> UUID:
        """Return the user id embedded in a valid refresh token."""
        return self._decode(token, REFRESH_TOKEN_TYPE, self.settings.refresh_token_secret)

    def refresh_access_token(self, refresh_token: str) -> str:
        """Mint a new access token for the subject of ``refresh_token``."""
        user_id = self.verify_refresh_token(refresh_token)
        return self.issue_access_token(user_id)

    @property
    def refresh_token_ttl_seconds(self) -> int:
        return self.settings.refresh_token_expire_days * 24 * 3600

    def _encode(self, user_id: UUID, token_type: str, expires_delta: timedelta, secret: str) -> str:
        now = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": str(user_id),
            "type": token_type,
            "iat": now,
            "exp": now + expires_delta,
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(claims, secret, algorithm=self.settings.jwt_algorithm)

    def _decode(self, token: str, expected_type: str, secret: str) -> UUID:
        try:
            payload = jwt.decode(token, secret, algorithms=[self.settings.jwt_algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError() from e

        if payload.get("type") != expected_type:
            raise InvalidTokenError()

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError()
        try:
            return UUID(subject)
        except (TypeError, ValueError) as e:
            raise InvalidTokenError() from e


def get_token_service() -> TokenService:
    """FastAPI dependency: token service bound to the current settings."""
    return TokenService(get_settings())
