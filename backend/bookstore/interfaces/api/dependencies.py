"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database import async_session
from ...modules.author.services import AuthorService
from ...modules.book.services import BookService
from ...modules.book_category.services import BookCategoryService
from ...modules.language.services import LanguageService
from ...modules.library.services import LibraryService

DbSession = Annotated[AsyncSession, Depends(async_session)]


def get_author_service() -> AuthorService:
    """Dependency for providing an AuthorService instance."""
    return AuthorService()


def get_library_service() -> LibraryService:
    """Dependency for providing a LibraryService instance."""
    return LibraryService()


def get_book_category_service() -> BookCategoryService:
    """Dependency for providing a BookCategoryService instance."""
    return BookCategoryService()


def get_language_service() -> LanguageService:
    """Dependency for providing a LanguageService instance."""
    return LanguageService()


def get_book_service() -> BookService:
    """Dependency for providing a BookService instance."""
    return BookService()
