# Who may read which note
import uuid

from sqlalchemy import Boolean, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class NoteAccess(BaseModel):
    """Sharing ledger row: ``user_id`` may view ``note_id``.

    The owner gets a row when the note is created, recipients get one when
    the note is shared with them. Revoking flips ``is_active`` off; sharing
    again flips it back on, so a pair never has more than one row.
    """

    __tablename__ = "note_access"

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "note_id", name="uq_note_access_user_note"),
        Index("idx_note_access_user_active", "user_id", "is_active"),
        Index("idx_note_access_note_id", "note_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteAccess(user_id={self.user_id}, note_id={self.note_id}, active={self.is_active})>"

    def revoke(self) -> None:
        self.is_active = False

    def reactivate(self) -> None:
        self.is_active = True
