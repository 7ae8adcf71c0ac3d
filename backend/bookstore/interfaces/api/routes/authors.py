"""Author API endpoints."""

from ....modules.author.schemas import AuthorCreate, AuthorRead, AuthorReplace
from ..dependencies import get_author_service
from .crud_router import create_crud_router

router = create_crud_router(
    prefix="/Authors",
    tag="Authors",
    entity_name="Author",
    service_dependency=get_author_service,
    create_schema=AuthorCreate,
    replace_schema=AuthorReplace,
    read_schema=AuthorRead,
)
