"""add favorites

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 16:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    # Create place_favorites table
    op.create_table(
        'place_favorites',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('place_id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['place_id'], ['places.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'place_id', name='uq_place_favorite')
    )
    op.create_index(op.f('ix_place_favorites_user_id'), 'place_favorites', ['user_id'], unique=False)
    op.create_index(op.f('ix_place_favorites_place_id'), 'place_favorites', ['place_id'], unique=False)

    # Create region_favorites table
    op.create_table(
        'region_favorites',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('region_id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['region_id'], ['regions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'region_id', name='uq_region_favorite')
    )
    op.create_index(op.f('ix_region_favorites_user_id'), 'region_favorites', ['user_id'], unique=False)
    op.create_index(op.f('ix_region_favorites_region_id'), 'region_favorites', ['region_id'], unique=False)


def downgrade() -> None:
    op.drop_table('region_favorites')
    op.drop_table('place_favorites')
