"""create preferences table

Revision ID: 3c1d9a7e5b20
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1d9a7e5b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'preferences',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('preferred_language', sa.String(), nullable=False),
        sa.Column('deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_by', sa.String(length=36), nullable=False),
        sa.Column('created_on', sa.DateTime(timezone=True), nullable=False),
        sa.Column('edited_by', sa.String(length=36), nullable=False),
        sa.Column('edited_on', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_preferences_user_id', 'preferences', ['user_id'])
    # At most one non-deleted preference per user.
    op.create_index(
        'ix_preferences_active_user_id',
        'preferences',
        ['user_id'],
        unique=True,
        sqlite_where=sa.text('deleted = 0'),
        postgresql_where=sa.text('deleted = false'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_preferences_active_user_id', table_name='preferences')
    op.drop_index('ix_preferences_user_id', table_name='preferences')
    op.drop_table('preferences')
