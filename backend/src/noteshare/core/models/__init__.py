"""
Database models for NoteShare.

Models included:
    - User: account with username/password authentication
    - Note: note content, owned by exactly one user
    - NoteAccess: sharing ledger, which user may read which note
"""

from .base import BaseModel
from .note import Note
from .note_access import NoteAccess
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "NoteAccess",
]
