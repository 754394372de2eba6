"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    AccessTokenResponse,
    LoginRequest,
    RefreshTokenRequest,
    SignupRequest,
    SignupResponse,
    TokenResponse,
)
from .common import FieldError, HealthCheckResponse, MessageResponse, ValidationErrorResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate, ShareRequest, ShareResponse

__all__ = [
    # Auth schemas
    "SignupRequest",
    "SignupResponse",
    "LoginRequest",
    "TokenResponse",
    "RefreshTokenRequest",
    "AccessTokenResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "ShareRequest",
    "ShareResponse",
    # Common schemas
    "MessageResponse",
    "FieldError",
    "ValidationErrorResponse",
    "HealthCheckResponse",
]
