"""Library management service."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from ..book.models import Book
from ..book.schemas import BookDetailRead
from ..common.services import EntityCrudService
from .crud import library_crud
from .models import Library
from .schemas import LibraryCreate, LibraryRead, LibraryReplace


class LibraryService(EntityCrudService[Library, LibraryCreate, LibraryReplace, LibraryRead]):
    """Service for managing libraries.

    Besides the generic CRUD contract, a library exposes the books it owns,
    each resolved together with its author, category and language.
    """

    entity_name = "Library"
    model = Library
    crud = library_crud
    read_schema = LibraryRead

    async def get_library_books(
        self,
        library_id: int,
        db: Optional[AsyncSession],
    ) -> List[BookDetailRead]:
        """Get the books of a library with their relations eagerly loaded.

        The author, category and language of every book come back from the
        same joined query, so the response needs a single round trip.

        Args:
            library_id: Library ID to get books from
            db: Database session

        Returns:
            Books ordered by id, each with nested author, category and language

        Raises:
            ResourceNotFoundError: If the library does not exist
        """
        session = self._require_store(db)
        if not await self.exists(library_id, session):
            raise self._not_found(library_id)

        stmt = (
            select(Book)
            .where(Book.library_id == library_id)
            .options(
                joinedload(Book.author),
                joinedload(Book.book_category),
                joinedload(Book.language),
            )
            .order_by(Book.id)
        )

        result = await session.execute(stmt)
        books = result.scalars().all()

        return [BookDetailRead.model_validate(book) for book in books]
