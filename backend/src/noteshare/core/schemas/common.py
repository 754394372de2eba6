"""
Shared response schemas - messages, errors, health
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Plain ``{"message": ...}`` body used by most non-resource responses."""

    message: str = Field(description="Human-readable message")


class FieldError(BaseModel):
    field: str = Field(description="Offending field, dotted for nested input")
    message: str = Field(description="What is wrong with it")


class ValidationErrorResponse(BaseModel):
    """Body of every 400 caused by bad input."""

    errors: List[FieldError]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"errors": [{"field": "email", "message": "Email is required"}]}
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
    error: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {"database": {"status": "healthy", "response_time_ms": 15}},
            }
        }
    )
