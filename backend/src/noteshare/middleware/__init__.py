"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, bearer_scheme, get_current_user, get_current_user_id

__all__ = ["JWTBearer", "bearer_scheme", "get_current_user", "get_current_user_id"]
