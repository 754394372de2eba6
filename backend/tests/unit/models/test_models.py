"""
Unit tests for the User, Note and NoteAccess models.
"""

import uuid
from datetime import timedelta

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.noteshare.core.models import Note, NoteAccess, User


class TestUserModel:
    async def test_create_user(self, test_session):
        user = User(username="alice", email="alice@example.com", password_hash="hash")
        test_session.add(user)
        await test_session.commit()

        assert isinstance(user.id, uuid.UUID)
        assert user.created_at is not None
        assert user.updated_at is not None

    async def test_username_is_unique(self, test_session):
        test_session.add(User(username="dup", email="a@example.com", password_hash="h"))
        await test_session.commit()

        test_session.add(User(username="dup", email="b@example.com", password_hash="h"))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()

    def test_repr_hides_secrets(self):
        user = User(username="alice", email="alice@example.com", password_hash="secret-hash")
        assert "secret-hash" not in repr(user)


class TestNoteModel:
    async def test_create_note(self, test_session, test_user):
        note = Note(title="Test Note", content="This is test content", owner_id=test_user.id)
        test_session.add(note)
        await test_session.commit()

        assert isinstance(note.id, uuid.UUID)
        assert note.is_owned_by(test_user.id)
        assert not note.is_owned_by(uuid.uuid4())

    def test_repr_truncates_long_titles(self):
        note = Note(title="x" * 80, content="c", owner_id=uuid.uuid4())
        assert "..." in repr(note)

    async def test_timestamps_load_as_utc(self, test_session, test_user):
        note = Note(title="t", content="c", owner_id=test_user.id)
        test_session.add(note)
        await test_session.commit()
        note_id = note.id
        test_session.expunge_all()

        loaded = (await test_session.execute(select(Note).where(Note.id == note_id))).scalar_one()
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.updated_at.utcoffset() == timedelta(0)

    async def test_owner_delete_cascades(self, test_session, test_user):
        note = Note(title="t", content="c", owner_id=test_user.id)
        test_session.add(note)
        await test_session.commit()
        note_id = note.id

        await test_session.delete(test_user)
        await test_session.commit()

        result = await test_session.execute(select(Note.id).where(Note.id == note_id))
        assert result.scalar_one_or_none() is None


class TestNoteAccessModel:
    async def _note(self, session, owner):
        note = Note(title="t", content="c", owner_id=owner.id)
        session.add(note)
        await session.flush()
        return note

    async def test_defaults_to_active(self, test_session, test_user):
        note = await self._note(test_session, test_user)
        access = NoteAccess(user_id=test_user.id, note_id=note.id)
        test_session.add(access)
        await test_session.commit()

        assert access.is_active is True

    async def test_revoke_and_reactivate(self, test_session, test_user):
        note = await self._note(test_session, test_user)
        access = NoteAccess(user_id=test_user.id, note_id=note.id)

        access.revoke()
        assert access.is_active is False
        access.reactivate()
        assert access.is_active is True

    async def test_one_row_per_pair(self, test_session, test_user):
        note = await self._note(test_session, test_user)
        test_session.add(NoteAccess(user_id=test_user.id, note_id=note.id))
        await test_session.commit()

        test_session.add(NoteAccess(user_id=test_user.id, note_id=note.id))
        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()
