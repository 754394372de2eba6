"""Note repository for database operations."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Subquery

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations.

    Writes only flush; the service that owns the unit of work commits.
    Listing and search take the caller's ledger grants as a subquery
    (``note_id``, ``granted_at``, ``access_id``) and page in SQL.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Stage a new note and assign its id."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.flush()
        return note

    async def get_by_id_and_owner(self, note_id: UUID, owner_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by the user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == owner_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_granted(self, grants: Subquery, offset: int = 0, limit: int = 10) -> List[Note]:
        """One page of the notes behind ``grants``, in grant order."""
        stmt = _granted_notes(grants).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply field updates to a loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)
        await self.session.flush()
        return note

    async def delete_note(self, note_id: UUID, owner_id: UUID) -> bool:
        """Delete note if owned by user."""
        stmt = delete(Note).where(and_(Note.id == note_id, Note.owner_id == owner_id))
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def search_notes(
        self,
        grants: Subquery,
        terms: Sequence[str],
        offset: int = 0,
        limit: int = 10,
    ) -> List[Note]:
        """Granted notes whose title or content contains any term.

        Matching is case-insensitive. Results keep grant order.
        """
        if not terms:
            return []

        conditions = []
        for term in terms:
            pattern = f"%{_escape_like(term)}%"
            conditions.append(Note.title.ilike(pattern, escape="\\"))
            conditions.append(Note.content.ilike(pattern, escape="\\"))

        stmt = _granted_notes(grants).where(or_(*conditions)).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars())


def _granted_notes(grants: Subquery) -> Select:
    return (
        select(Note)
        .join(grants, grants.c.note_id == Note.id)
        .order_by(grants.c.granted_at, grants.c.access_id)
    )


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
