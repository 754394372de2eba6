"""Note service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import (
    AlreadySharedError,
    InternalError,
    NoteNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate, ShareResponse
from .interfaces import INoteService
from .sharing_ledger import SharingLedger

logger = get_logger("notes")


class NoteService(INoteService):
    """Note operations for an already authenticated user.

    Reads that list or search follow the sharing ledger; reading a single
    note, updating, deleting and sharing require ownership. A note the user
    doesn't own is reported exactly like a missing one.
    """

    def __init__(
        self,
        session: AsyncSession,
        note_repo: NoteRepository,
        ledger: SharingLedger,
        user_repo: UserRepository,
    ):
        self.session = session
        self.note_repo = note_repo
        self.ledger = ledger
        self.user_repo = user_repo

    async def list_notes(self, user_id: UUID, page: int = 1, page_size: int = 10) -> List[NoteResponse]:
        """Owned and shared notes, in the order access was granted."""
        offset, limit = _page_window(page, page_size)
        grants = self.ledger.list_accessible_note_ids(user_id)
        notes = await self.note_repo.list_granted(grants, offset=offset, limit=limit)
        return [self._note_to_response(note) for note in notes]

    async def get_note(self, user_id: UUID, note_id: UUID) -> NoteResponse:
        note = await self._get_owned_note(user_id, note_id)
        return self._note_to_response(note)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create a note and the owner's ledger row in one transaction."""
        try:
            note = await self.note_repo.create_note(
                {"title": request.title, "content": request.content, "owner_id": user_id}
            )
            await self.ledger.grant_access(user_id, note.id)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to create note", exc_info=e, extra={"user_id": str(user_id)})
            raise InternalError() from e

        logger.info("Note created", extra={"note_id": str(note.id), "user_id": str(user_id)})
        return self._note_to_response(note)

    async def update_note(self, user_id: UUID, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        note = await self._get_owned_note(user_id, note_id)
        note = await self.note_repo.update_note(note, request.changes())
        await self.session.commit()
        return self._note_to_response(note)

    async def delete_note(self, user_id: UUID, note_id: UUID) -> None:
        """Delete an owned note together with every ledger row pointing at it."""
        await self._get_owned_note(user_id, note_id)
        removed = await self.ledger.remove_note(note_id)
        if not await self.note_repo.delete_note(note_id, user_id):
            # deleted by a concurrent request in between
            await self.session.rollback()
            raise NoteNotFoundError()
        await self.session.commit()

        logger.info("Note deleted", extra={"note_id": str(note_id), "access_rows_removed": removed})

    async def share_note(self, user_id: UUID, note_id: UUID, recipient_id: UUID) -> ShareResponse:
        """Give ``recipient_id`` read access to a note the caller owns."""
        if not await self.user_repo.exists(recipient_id):
            raise UserNotFoundError()

        await self._get_owned_note(user_id, note_id)
        if await self.ledger.has_access(recipient_id, note_id):
            raise AlreadySharedError()

        try:
            await self.ledger.grant_access(recipient_id, note_id)
            await self.session.commit()
        except IntegrityError as e:
            # a concurrent share of the same pair got there first
            await self.session.rollback()
            raise AlreadySharedError() from e

        logger.info(
            "Note shared",
            extra={"note_id": str(note_id), "owner_id": str(user_id), "recipient_id": str(recipient_id)},
        )
        return ShareResponse(message="Note shared successfully.", note_id=note_id, user_id=recipient_id)

    async def unshare_note(self, user_id: UUID, note_id: UUID, recipient_id: UUID) -> None:
        note = await self._get_owned_note(user_id, note_id)
        if note.is_owned_by(recipient_id):
            raise ValidationError.for_field("receiverId", "The owner's access cannot be revoked.")

        await self.ledger.revoke_access(recipient_id, note_id)
        await self.session.commit()

        logger.info(
            "Note unshared",
            extra={"note_id": str(note_id), "owner_id": str(user_id), "recipient_id": str(recipient_id)},
        )

    async def search_notes(
        self, user_id: UUID, query: str, page: int = 1, page_size: int = 10
    ) -> List[NoteResponse]:
        """Text search limited to the notes the user can see."""
        terms = query.split()
        if not terms:
            return []

        offset, limit = _page_window(page, page_size)
        grants = self.ledger.list_accessible_note_ids(user_id)
        notes = await self.note_repo.search_notes(grants, terms, offset=offset, limit=limit)
        return [self._note_to_response(note) for note in notes]

    async def _get_owned_note(self, user_id: UUID, note_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_owner(note_id, user_id)
        if note is None:
            raise NoteNotFoundError()
        return note

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            owner_id=note.owner_id,
        )


def _page_window(page: int, page_size: int) -> tuple[int, int]:
    page = max(page, 1)
    page_size = max(page_size, 1)
    return (page - 1) * page_size, page_size
