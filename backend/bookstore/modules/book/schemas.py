"""Pydantic schemas for book entities."""

from typing import Annotated

from pydantic import Field

from ..author.schemas import AuthorRead
from ..book_category.schemas import BookCategoryRead
from ..common.schemas import CamelModel, EntityRead, EntityReplace
from ..language.schemas import LanguageRead


class BookBase(CamelModel):
    """Base schema for book data."""

    title: Annotated[str, Field(min_length=1, max_length=255, description="Book title")]
    year: int = Field(description="Publication year")
    isbn: Annotated[str, Field(max_length=32, description="ISBN")]
    author_id: int = Field(description="ID of the book's author")
    library_id: int = Field(description="ID of the library holding the book")
    book_category_id: int = Field(description="ID of the book's category")
    language_id: int = Field(description="ID of the book's language")


class BookCreate(BookBase):
    """Schema for creating a new book."""

    pass


class BookReplace(BookBase, EntityReplace):
    """Schema for replacing an existing book."""

    pass


class BookRead(BookBase, EntityRead):
    """Schema for reading book data."""

    pass


class BookDetailRead(BookRead):
    """Book with its author, category and language resolved into nested objects."""

    author: AuthorRead
    book_category: BookCategoryRead
    language: LanguageRead
