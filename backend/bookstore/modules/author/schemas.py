"""Pydantic schemas for author entities."""

from typing import Annotated

from pydantic import Field

from ..common.schemas import CamelModel, EntityRead, EntityReplace


class AuthorBase(CamelModel):
    """Base schema for author data."""

    first_name: Annotated[str, Field(min_length=1, max_length=255, description="Given name")]
    last_name: Annotated[str, Field(min_length=1, max_length=255, description="Family name")]


class AuthorCreate(AuthorBase):
    """Schema for creating a new author."""

    pass


class AuthorReplace(AuthorBase, EntityReplace):
    """Schema for replacing an existing author."""

    pass


class AuthorRead(AuthorBase, EntityRead):
    """Schema for reading author data."""

    pass
