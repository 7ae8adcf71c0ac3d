"""Library API endpoints."""

from typing import List

from fastapi import Depends

from ....modules.book.schemas import BookDetailRead
from ....modules.common.utils.error_handler import handle_exception, internal_server_error
from ....modules.library.schemas import LibraryCreate, LibraryRead, LibraryReplace
from ....modules.library.services import LibraryService
from ..dependencies import DbSession, get_library_service
from .crud_router import create_crud_router

router = create_crud_router(
    prefix="/Libraries",
    tag="Libraries",
    entity_name="Library",
    service_dependency=get_library_service,
    create_schema=LibraryCreate,
    replace_schema=LibraryReplace,
    read_schema=LibraryRead,
)


@router.get(
    "/{library_id}/books",
    response_model=List[BookDetailRead],
    summary="List Library Books",
    description="""
    Returns the books held by a library.

    Each book carries its author, category and language as nested objects,
    all loaded in one joined query.
    """,
    responses={
        200: {"description": "Books of the library with nested relations"},
        404: {"description": "Library not found"},
    },
)
async def get_library_books(
    library_id: int,
    db: DbSession,
    library_service: LibraryService = Depends(get_library_service),
):
    """Get the books of a library."""
    try:
        return await library_service.get_library_books(library_id, db)
    except Exception as e:
        http_exc = handle_exception(e)
        if http_exc:
            raise http_exc
        raise internal_server_error(e, f"listing books of Library {library_id}")
