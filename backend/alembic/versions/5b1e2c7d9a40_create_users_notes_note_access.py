"""Create users, notes and note_access tables

Revision ID: 5b1e2c7d9a40
Revises:
Create Date: 2026-10-19 10:12:05.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from noteshare.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '5b1e2c7d9a40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('idx_users_username', 'users', ['username'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
    )
    op.create_index('idx_notes_title', 'notes', ['title'])
    op.create_index('idx_notes_owner_id', 'notes', ['owner_id'])
    op.create_index('idx_notes_owner_created', 'notes', ['owner_id', 'created_at'])

    op.create_table(
        'note_access',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('user_id', 'note_id', name='uq_note_access_user_note'),
    )
    op.create_index('idx_note_access_user_active', 'note_access', ['user_id', 'is_active'])
    op.create_index('idx_note_access_note_id', 'note_access', ['note_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_note_access_note_id', table_name='note_access')
    op.drop_index('idx_note_access_user_active', table_name='note_access')
    op.drop_table('note_access')
    op.drop_index('idx_notes_owner_created', table_name='notes')
    op.drop_index('idx_notes_owner_id', table_name='notes')
    op.drop_index('idx_notes_title', table_name='notes')
    op.drop_table('notes')
    op.drop_index('idx_users_username', table_name='users')
    op.drop_table('users')
