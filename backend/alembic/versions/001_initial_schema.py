"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Artists table
    op.create_table(
        'artists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('normalized_name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index('ix_artists_id', 'artists', ['id'])
    op.create_index('ix_artists_normalized_name', 'artists', ['normalized_name'], unique=True)

    # Songs table
    op.create_table(
        'songs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('release_date', sa.Date()),
        sa.Column('lyrics', sa.Text(), nullable=False, server_default=''),
        sa.Column('link', sa.String(1000), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['artist_id'], ['artists.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_songs_id', 'songs', ['id'])
    op.create_index('ix_songs_artist_id', 'songs', ['artist_id'])
    op.create_index('ix_songs_title', 'songs', ['title'])
    op.create_index('ix_songs_release_date', 'songs', ['release_date'])


def downgrade() -> None:
    op.drop_table('songs')
    op.drop_table('artists')
