"""Book category API endpoints."""

from typing import List

from fastapi import Depends

from ....modules.book_category.schemas import BookCategoryCreate, BookCategoryRead, BookCategoryReplace
from ....modules.book_category.services import BookCategoryService
from ....modules.common.utils.error_handler import handle_exception, internal_server_error
from ..dependencies import DbSession, get_book_category_service
from .crud_router import create_crud_router

router = create_crud_router(
    prefix="/BookCategories",
    tag="Book Categories",
    entity_name="BookCategory",
    service_dependency=get_book_category_service,
    create_schema=BookCategoryCreate,
    replace_schema=BookCategoryReplace,
    read_schema=BookCategoryRead,
)


@router.get(
    "/{category_id}/children",
    response_model=List[BookCategoryRead],
    summary="List Child Categories",
    description="Returns the categories whose parent is the given category, ordered by id.",
    responses={
        200: {"description": "Direct children of the category"},
        404: {"description": "Category not found"},
    },
)
async def get_category_children(
    category_id: int,
    db: DbSession,
    category_service: BookCategoryService = Depends(get_book_category_service),
):
    """Get the direct children of a category."""
    try:
        return await category_service.get_children(category_id, db)
    except Exception as e:
        http_exc = handle_exception(e)
        if http_exc:
            raise http_exc
        raise internal_server_error(e, f"listing children of BookCategory {category_id}")
