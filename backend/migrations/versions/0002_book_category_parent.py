"""book_category_parent

Revision ID: 0002
Revises: 0001
Create Date: 2024-06-11

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002'
down_revision: Union[str, None] = '0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Categories may nest under a parent category
    with op.batch_alter_table('book_categories') as batch_op:
        batch_op.add_column(sa.Column('parent_id', sa.Integer(), nullable=True))
        batch_op.create_index('ix_book_categories_parent_id', ['parent_id'])
        batch_op.create_foreign_key(
            'fk_book_categories_parent_id_book_categories',
            'book_categories',
            ['parent_id'],
            ['id'],
        )


def downgrade() -> None:
    with op.batch_alter_table('book_categories') as batch_op:
        batch_op.drop_constraint('fk_book_categories_parent_id_book_categories', type_='foreignkey')
        batch_op.drop_index('ix_book_categories_parent_id')
        batch_op.drop_column('parent_id')
