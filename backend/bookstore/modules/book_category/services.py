"""Book category management service."""

from typing import List, Optional, Set

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..common.constants import DEFAULT_ORDER_COLUMN
from ..common.exceptions import CategoryCycleError
from ..common.services import EntityCrudService
from .crud import book_category_crud
from .models import BookCategory
from .schemas import BookCategoryCreate, BookCategoryRead, BookCategoryReplace


class BookCategoryService(EntityCrudService[BookCategory, BookCategoryCreate, BookCategoryReplace, BookCategoryRead]):
    """Service for managing the book category tree.

    On top of the generic CRUD contract it keeps the parent relation acyclic:
    every replacement walks up from the requested parent and refuses the write
    if the walk reaches the category being replaced.
    """

    entity_name = "BookCategory"
    model = BookCategory
    crud = book_category_crud
    read_schema = BookCategoryRead

    async def validate_replacement(self, entity_id: int, payload: BookCategoryReplace, db: AsyncSession) -> None:
        """Reject a parent that is the category itself or one of its descendants.

        Raises:
            CategoryCycleError: If the new parent chain leads back to ``entity_id``
        """
        if payload.parent_id == entity_id:
            raise CategoryCycleError(f"BookCategory {entity_id} cannot be its own parent.")

        visited: Set[int] = set()
        ancestor_id = payload.parent_id
        while ancestor_id is not None and ancestor_id not in visited:
            if ancestor_id == entity_id:
                raise CategoryCycleError(
                    f"BookCategory {entity_id} cannot be placed under its own descendant {payload.parent_id}."
                )
            visited.add(ancestor_id)
            ancestor_id = await self._parent_of(ancestor_id, db)

    async def get_children(self, category_id: int, db: Optional[AsyncSession]) -> List[BookCategoryRead]:
        """Get the direct children of a category, ordered by id.

        Raises:
            ResourceNotFoundError: If the category does not exist
        """
        session = self._require_store(db)
        if not await self.exists(category_id, session):
            raise self._not_found(category_id)

        result = await self.crud.get_multi(
            db=session,
            limit=None,
            sort_columns=DEFAULT_ORDER_COLUMN,
            sort_orders="asc",
            return_total_count=False,
            parent_id=category_id,
        )
        return [BookCategoryRead.model_validate(row) for row in result["data"]]

    async def _parent_of(self, category_id: int, db: AsyncSession) -> Optional[int]:
        # A missing row ends the walk the same way a root does.
        result = await db.execute(select(BookCategory.parent_id).where(BookCategory.id == category_id))
        return result.scalar_one_or_none()
