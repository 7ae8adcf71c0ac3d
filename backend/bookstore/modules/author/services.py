"""Author management service."""

from ..common.services import EntityCrudService
from .crud import author_crud
from .models import Author
from .schemas import AuthorCreate, AuthorRead, AuthorReplace


class AuthorService(EntityCrudService[Author, AuthorCreate, AuthorReplace, AuthorRead]):
    """Service for managing authors."""

    entity_name = "Author"
    model = Author
    crud = author_crud
    read_schema = AuthorRead
