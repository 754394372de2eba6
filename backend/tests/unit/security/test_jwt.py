"""
Unit tests for the JWT token service.
"""

from datetime import timedelta
from uuid import UUID, uuid4

import pytest
from jose import JWTError, jwt

from src.noteshare.config import Settings
from src.noteshare.core.exceptions import InvalidTokenError, TokenExpiredError, UnauthorizedError
from src.noteshare.security.jwt import TokenService


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        jwt_secret="access-secret",
        refresh_token_secret="refresh-secret",
        access_token_expire_minutes=30,
        refresh_token_expire_days=7,
    )


@pytest.fixture
def tokens(settings):
    return TokenService(settings)


class TestIssue:
    def test_access_token_claims(self, tokens, settings):
        user_id = uuid4()
        token = tokens.issue_access_token(user_id)

        decoded = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
        assert decoded["sub"] == str(user_id)
        assert decoded["type"] == "access"
        assert decoded["exp"] - decoded["iat"] == 30 * 60
        assert "jti" in decoded

    def test_refresh_token_signed_with_own_secret(self, tokens, settings):
        user_id = uuid4()
        token = tokens.issue_refresh_token(user_id)

        decoded = jwt.decode(token, settings.refresh_token_secret, algorithms=["HS256"])
        assert decoded["sub"] == str(user_id)
        assert decoded["type"] == "refresh"
        assert decoded["exp"] - decoded["iat"] == 7 * 24 * 3600

        with pytest.raises(JWTError):
            jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])

    def test_tokens_are_unique(self, tokens):
        user_id = uuid4()
        assert tokens.issue_access_token(user_id) != tokens.issue_access_token(user_id)

    def test_refresh_ttl_seconds(self, tokens):
        assert tokens.refresh_token_ttl_seconds == 604800


class TestVerify:
    def test_roundtrip_access(self, tokens):
        user_id = uuid4()
        assert tokens.verify_access_token(tokens.issue_access_token(user_id)) == user_id

    def test_verify_returns_uuid(self, tokens):
        user_id = uuid4()
        assert isinstance(tokens.verify_refresh_token(tokens.issue_refresh_token(user_id)), UUID)

    def test_expired_access_token(self, tokens):
        token = tokens.issue_access_token(uuid4(), expires_delta=timedelta(seconds=-10))
        with pytest.raises(TokenExpiredError):
            tokens.verify_access_token(token)

    def test_tampered_token(self, tokens):
        token = tokens.issue_access_token(uuid4())
        head, payload, signature = token.split(".")
        tampered = ".".join([head, payload, signature[::-1]])
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token(tampered)

    def test_garbage_token(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token("not-a-jwt")

    def test_refresh_token_rejected_as_access(self, tokens):
        token = tokens.issue_refresh_token(uuid4())
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token(token)

    def test_access_token_rejected_as_refresh(self, tokens):
        token = tokens.issue_access_token(uuid4())
        with pytest.raises(InvalidTokenError):
            tokens.verify_refresh_token(token)

    def test_wrong_type_claim_with_right_secret(self, tokens, settings):
        token = jwt.encode(
            {"sub": str(uuid4()), "type": "refresh"}, settings.jwt_secret, algorithm="HS256"
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token(token)

    def test_missing_or_bad_subject(self, tokens, settings):
        no_sub = jwt.encode({"type": "access"}, settings.jwt_secret, algorithm="HS256")
        bad_sub = jwt.encode(
            {"type": "access", "sub": "not-a-uuid"}, settings.jwt_secret, algorithm="HS256"
        )
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token(no_sub)
        with pytest.raises(InvalidTokenError):
            tokens.verify_access_token(bad_sub)

    def test_token_errors_are_unauthorized(self):
        assert issubclass(InvalidTokenError, UnauthorizedError)
        assert issubclass(TokenExpiredError, UnauthorizedError)
        assert InvalidTokenError().status_code == 401


class TestRefresh:
    def test_refresh_access_token_keeps_subject(self, tokens):
        user_id = uuid4()
        access = tokens.refresh_access_token(tokens.issue_refresh_token(user_id))
        assert tokens.verify_access_token(access) == user_id

    def test_refresh_with_access_token_fails(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.refresh_access_token(tokens.issue_access_token(uuid4()))

    def test_expired_refresh_token(self, tokens):
        token = tokens.issue_refresh_token(uuid4(), expires_delta=timedelta(seconds=-1))
        with pytest.raises(TokenExpiredError):
            tokens.refresh_access_token(token)
