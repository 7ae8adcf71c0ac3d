"""Book management service."""

from ..common.services import EntityCrudService
from .crud import book_crud
from .models import Book
from .schemas import BookCreate, BookRead, BookReplace


class BookService(EntityCrudService[Book, BookCreate, BookReplace, BookRead]):
    """Service for managing books.

    Foreign keys are not pre-checked: a book pointing at a missing author,
    library, category or language is rejected by the store and nothing is
    written.
    """

    entity_name = "Book"
    model = Book
    crud = book_crud
    read_schema = BookRead
