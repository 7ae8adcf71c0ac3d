"""Pydantic schemas for language entities."""

from typing import Annotated

from pydantic import Field

from ..common.schemas import CamelModel, EntityRead, EntityReplace


class LanguageBase(CamelModel):
    """Base schema for language data."""

    name: Annotated[str, Field(min_length=1, max_length=100, description="Language name")]


class LanguageCreate(LanguageBase):
    """Schema for creating a new language."""

    pass


class LanguageReplace(LanguageBase, EntityReplace):
    """Schema for replacing an existing language."""

    pass


class LanguageRead(LanguageBase, EntityRead):
    """Schema for reading language data."""

    pass
