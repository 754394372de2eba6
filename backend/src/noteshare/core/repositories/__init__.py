"""Repository layer for data access."""

from .access_repository import NoteAccessRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "NoteAccessRepository",
]
