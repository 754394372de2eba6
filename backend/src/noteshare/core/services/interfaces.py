"""
Service interfaces for NoteShare.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from sqlalchemy.sql.expression import Subquery

from ..models.note_access import NoteAccess
from ..models.user import User
from ..schemas.auth import LoginRequest, SignupRequest, SignupResponse, TokenResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate, ShareResponse


class IAuthService(ABC):
    """Credential store plus token hand-out."""

    @abstractmethod
    async def create_account(self, username: str, password: str, email: str) -> UUID:
        """Persist a new user, return its id."""

    @abstractmethod
    async def verify_credentials(self, username: str, password: str) -> User:
        """Return the user if the password matches."""

    @abstractmethod
    async def signup(self, request: SignupRequest) -> SignupResponse:
        """Register new user."""

    @abstractmethod
    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""

    @abstractmethod
    async def refresh(self, refresh_token: str) -> str:
        """Exchange a refresh token for a new access token."""


class ISharingLedger(ABC):
    """Many-to-many visibility relation between users and notes."""

    @abstractmethod
    async def grant_access(self, user_id: UUID, note_id: UUID) -> NoteAccess:
        """Let ``user_id`` read ``note_id``."""

    @abstractmethod
    async def revoke_access(self, user_id: UUID, note_id: UUID) -> NoteAccess:
        """Take read access away again."""

    @abstractmethod
    def list_accessible_note_ids(self, user_id: UUID) -> Subquery:
        """Owned and shared-to note ids."""

    @abstractmethod
    async def has_access(self, user_id: UUID, note_id: UUID) -> bool:
        """Whether an active relation exists."""

    @abstractmethod
    async def remove_note(self, note_id: UUID) -> int:
        """Forget every relation for a deleted note."""


class INoteService(ABC):
    """Note operations on behalf of an authenticated user."""

    @abstractmethod
    async def list_notes(self, user_id: UUID, page: int, page_size: int) -> List[NoteResponse]:
        pass

    @abstractmethod
    async def get_note(self, user_id: UUID, note_id: UUID) -> NoteResponse:
        pass

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(self, user_id: UUID, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, user_id: UUID, note_id: UUID) -> None:
        pass

    @abstractmethod
    async def share_note(self, user_id: UUID, note_id: UUID, recipient_id: UUID) -> ShareResponse:
        pass

    @abstractmethod
    async def unshare_note(self, user_id: UUID, note_id: UUID, recipient_id: UUID) -> None:
        pass

    @abstractmethod
    async def search_notes(
        self, user_id: UUID, query: str, page: int, page_size: int
    ) -> List[NoteResponse]:
        pass


class IHealthService(ABC):
    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
