"""Security utilities."""

from .jwt import TokenService, get_token_service
from .password import dummy_verify, hash_password, verify_password

__all__ = [
    "TokenService",
    "get_token_service",
    "hash_password",
    "verify_password",
    "dummy_verify",
]
