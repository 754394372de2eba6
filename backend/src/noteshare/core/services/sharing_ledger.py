"""Sharing ledger: who may read which note."""

from uuid import UUID

from sqlalchemy.sql.expression import Subquery

from ..exceptions import AlreadySharedError, NotFoundError
from ..logging import get_logger
from ..models.note_access import NoteAccess
from ..repositories.access_repository import NoteAccessRepository
from .interfaces import ISharingLedger

logger = get_logger("sharing")


class SharingLedger(ISharingLedger):
    """Owns the (user, note) visibility relation.

    Every method stages its writes on the repository's session and leaves
    the commit to the caller, so a grant always lands in the same
    transaction as the write it belongs to (note creation or share).
    """

    def __init__(self, access_repo: NoteAccessRepository):
        self.access_repo = access_repo

    async def grant_access(self, user_id: UUID, note_id: UUID) -> NoteAccess:
        existing = await self.access_repo.get_access(user_id, note_id)
        if existing is not None:
            if existing.is_active:
                raise AlreadySharedError()
            existing.reactivate()
            access = await self.access_repo.save(existing)
        else:
            access = await self.access_repo.create_access(user_id, note_id)

        logger.debug("Access granted", extra={"user_id": str(user_id), "note_id": str(note_id)})
        return access

    async def revoke_access(self, user_id: UUID, note_id: UUID) -> NoteAccess:
        existing = await self.access_repo.get_access(user_id, note_id)
        if existing is None or not existing.is_active:
            raise NotFoundError("Note is not shared with the specified user.")
        existing.revoke()
        return await self.access_repo.save(existing)

    def list_accessible_note_ids(self, user_id: UUID) -> Subquery:
        """Owned and shared-to note ids, as a subquery carrying grant order."""
        return self.access_repo.active_grants(user_id)

    async def has_access(self, user_id: UUID, note_id: UUID) -> bool:
        access = await self.access_repo.get_access(user_id, note_id)
        return access is not None and access.is_active

    async def remove_note(self, note_id: UUID) -> int:
        return await self.access_repo.delete_for_note(note_id)
