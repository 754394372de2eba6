"""Service layer."""

from .auth_service import AuthService
from .health_service import HealthService
from .note_service import NoteService
from .sharing_ledger import SharingLedger

__all__ = ["AuthService", "NoteService", "SharingLedger", "HealthService"]
