"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2024-05-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_authors_last_name', 'authors', ['last_name'])

    op.create_table(
        'libraries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_libraries_name', 'libraries', ['name'])

    op.create_table(
        'book_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_book_categories_name', 'book_categories', ['name'])

    op.create_table(
        'languages',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_languages_name', 'languages', ['name'])

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('isbn', sa.String(length=32), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('library_id', sa.Integer(), nullable=False),
        sa.Column('book_category_id', sa.Integer(), nullable=False),
        sa.Column('language_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['author_id'], ['authors.id']),
        sa.ForeignKeyConstraint(['library_id'], ['libraries.id']),
        sa.ForeignKeyConstraint(['book_category_id'], ['book_categories.id']),
        sa.ForeignKeyConstraint(['language_id'], ['languages.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_books_title', 'books', ['title'])
    op.create_index('ix_books_author_id', 'books', ['author_id'])
    op.create_index('ix_books_library_id', 'books', ['library_id'])
    op.create_index('ix_books_book_category_id', 'books', ['book_category_id'])
    op.create_index('ix_books_language_id', 'books', ['language_id'])


def downgrade() -> None:
    op.drop_table('books')
    op.drop_table('languages')
    op.drop_table('book_categories')
    op.drop_table('libraries')
    op.drop_table('authors')
