"""
Domain exceptions.

Services raise these; the handlers registered in ``main.py`` turn them into
JSON responses. Every class carries the HTTP status it maps to.
"""

from typing import Any, Dict, List, Optional


class NoteShareError(Exception):
    """Base class for all errors the API knows how to answer."""

    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(NoteShareError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Validation failed."

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([{"field": field, "message": message}], message)

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class UnauthorizedError(NoteShareError):
    status_code = 401
    default_message = "Unauthorized."


class InvalidTokenError(UnauthorizedError):
    default_message = "Invalid token."


class TokenExpiredError(UnauthorizedError):
    default_message = "Token has expired."


class InvalidCredentialsError(UnauthorizedError):
    default_message = "Unauthorized - Wrong username or password"


class NotFoundError(NoteShareError):
    # not-owned and not-existing both map here
    status_code = 404
    default_message = "Resource not found."


class NoteNotFoundError(NotFoundError):
    default_message = "Note not found for the authenticated user."


class UserNotFoundError(NotFoundError):
    default_message = "User with specified ID not found."


class ConflictError(NoteShareError):
    # answered with 400, not 409
    status_code = 400
    default_message = "Conflict."


class AlreadySharedError(ConflictError):
    default_message = "Note is already shared with the specified user."


class UsernameTakenError(ConflictError):
    default_message = "Username already exists."


class InternalError(NoteShareError):
    status_code = 500
    default_message = "Internal server error."
