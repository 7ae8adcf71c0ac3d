"""Pydantic schemas for library entities."""

from typing import Annotated

from pydantic import Field

from ..common.schemas import CamelModel, EntityRead, EntityReplace


class LibraryBase(CamelModel):
    """Base schema for library data."""

    name: Annotated[str, Field(min_length=1, max_length=255, description="Library name")]
    address: Annotated[str, Field(max_length=500, description="Postal address")]


class LibraryCreate(LibraryBase):
    """Schema for creating a new library."""

    pass


class LibraryReplace(LibraryBase, EntityReplace):
    """Schema for replacing an existing library."""

    pass


class LibraryRead(LibraryBase, EntityRead):
    """Schema for reading library data."""

    pass
