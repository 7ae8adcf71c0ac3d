"""Shared Pydantic schema bases."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire.

    Fields are declared in snake_case and serialized as camelCase
    (``first_name`` -> ``firstName``). Input accepts either spelling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class EntityRead(CamelModel):
    """Base schema for reading a persisted entity."""

    id: int


class EntityReplace(CamelModel):
    """Base schema for whole-record replacement.

    The body repeats the entity identity so it can be checked against
    the identity in the path.
    """

    id: int
