"""
Authentication schemas.

Wire names are camelCase (``accessToken``, ``userId``); Python attributes
stay snake_case through aliases.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class SignupRequest(BaseModel):
    """Account creation request."""

    username: str = Field(min_length=1, max_length=50, description="Unique username")
    password: str = Field(min_length=1, max_length=128, description="User password")
    email: EmailStr = Field(description="Contact email")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "john_doe",
                "password": "securepassword123",
                "email": "john@example.com",
            }
        }
    )


class SignupResponse(BaseModel):
    message: str
    user_id: uuid.UUID = Field(alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=1, max_length=50, description="Username")
    password: str = Field(min_length=1, max_length=128, description="User password")


class TokenResponse(BaseModel):
    """Tokens handed out on login."""

    access_token: str = Field(alias="accessToken", description="JWT access token")
    refresh_token: str = Field(alias="refreshToken", description="JWT refresh token")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refreshToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        },
    )


class RefreshTokenRequest(BaseModel):
    """Refresh request; the token may also arrive as a cookie."""

    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")

    model_config = ConfigDict(populate_by_name=True)


class AccessTokenResponse(BaseModel):
    access_token: str = Field(alias="accessToken")

    model_config = ConfigDict(populate_by_name=True)
