"""Initial schema: users, notes, sharing rows, comments, refresh tokens

Revision ID: 8f3c2a1d5e07
Revises:
Create Date: 2025-10-02 09:14:51.220417

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from noteshare.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '8f3c2a1d5e07'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('name IS NULL OR length(name) <= 100', name='ck_users_name_len'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_users_active', 'users', ['is_active'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('color', sa.String(length=50), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('owner_id', GUID(), nullable=False),
        sa.Column('updated_by_id', GUID(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['updated_by_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_notes_owner_id', 'notes', ['owner_id'])
    op.create_index('idx_notes_updated_id', 'notes', ['updated_at', 'id'])

    op.create_table(
        'note_public_links',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('slug', sa.String(length=64), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('note_id'),
        sa.UniqueConstraint('slug'),
    )

    op.create_table(
        'note_collaborators',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(role) <= 20', name='ck_note_collaborators_role_len'),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('note_id', 'user_id', name='uq_note_collaborators_note_user'),
    )
    op.create_index('idx_note_collaborators_user_id', 'note_collaborators', ['user_id'])

    op.create_table(
        'comments',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('author_id', GUID(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_comments_note_created', 'comments', ['note_id', 'created_at'])

    op.create_table(
        'refresh_tokens',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token'),
    )
    op.create_index('idx_refresh_tokens_user_id', 'refresh_tokens', ['user_id'])
    op.create_index('idx_refresh_tokens_expires_at', 'refresh_tokens', ['expires_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('refresh_tokens')
    op.drop_table('comments')
    op.drop_table('note_collaborators')
    op.drop_table('note_public_links')
    op.drop_table('notes')
    op.drop_table('users')
