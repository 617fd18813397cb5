"""Create urls table

Revision ID: 001_create_urls
Revises: 
Create Date: 2025-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_create_urls'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the urls table: short id (primary key) to origin URL.
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'urls' not in existing_tables:
        op.create_table(
            'urls',
            sa.Column('id', sa.Text(), nullable=False),
            sa.Column('url', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )


def downgrade() -> None:
    """
    Drop the urls table.
    """
    op.drop_table('urls')
