"""Book API endpoints."""

from ....modules.book.schemas import BookCreate, BookRead, BookReplace
from ..dependencies import get_book_service
from .crud_router import create_crud_router

router = create_crud_router(
    prefix="/Books",
    tag="Books",
    entity_name="Book",
    service_dependency=get_book_service,
    create_schema=BookCreate,
    replace_schema=BookReplace,
    read_schema=BookRead,
)
