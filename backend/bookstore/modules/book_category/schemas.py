"""Pydantic schemas for book category entities."""

from typing import Annotated, Optional

from pydantic import Field

from ..common.schemas import CamelModel, EntityRead, EntityReplace


class BookCategoryBase(CamelModel):
    """Base schema for book category data."""

    name: Annotated[str, Field(min_length=1, max_length=255, description="Category name")]
    parent_id: Optional[int] = Field(default=None, description="ID of the parent category, None for a root")


class BookCategoryCreate(BookCategoryBase):
    """Schema for creating a new book category."""

    pass


class BookCategoryReplace(BookCategoryBase, EntityReplace):
    """Schema for replacing an existing book category."""

    pass


class BookCategoryRead(BookCategoryBase, EntityRead):
    """Schema for reading book category data."""

    pass
