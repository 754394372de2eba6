"""Sharing ledger repository (note_access table)."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.sql.expression import Subquery
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note_access import NoteAccess


class NoteAccessRepository:
    """Repository for ledger rows. Writes only flush."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_access(self, user_id: UUID, note_id: UUID) -> NoteAccess:
        access = NoteAccess(user_id=user_id, note_id=note_id, is_active=True)
        self.session.add(access)
        await self.session.flush()
        return access

    async def get_access(self, user_id: UUID, note_id: UUID) -> Optional[NoteAccess]:
        """Get the row for a pair, active or not."""
        stmt = select(NoteAccess).where(
            and_(NoteAccess.user_id == user_id, NoteAccess.note_id == note_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, access: NoteAccess) -> NoteAccess:
        self.session.add(access)
        await self.session.flush()
        return access

    def active_grants(self, user_id: UUID) -> Subquery:
        """Active rows for a user as a subquery to join notes against.

        Columns: ``note_id``, ``granted_at`` and ``access_id``; ordering by the
        last two gives grant order.
        """
        return (
            select(
                NoteAccess.note_id,
                NoteAccess.created_at.label("granted_at"),
                NoteAccess.id.label("access_id"),
            )
            .where(and_(NoteAccess.user_id == user_id, NoteAccess.is_active.is_(True)))
            .subquery("grants")
        )

    async def delete_for_note(self, note_id: UUID) -> int:
        """Drop every row pointing at a note."""
        stmt = delete(NoteAccess).where(NoteAccess.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.rowcount
