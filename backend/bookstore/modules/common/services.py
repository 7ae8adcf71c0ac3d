"""Generic entity CRUD service shared by every entity module."""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, cast

from fastcrud import FastCRUD
from pydantic import BaseModel
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from ...infrastructure.database.session import Base
from ...infrastructure.logging import get_logger
from .constants import DEFAULT_ORDER_COLUMN
from .exceptions import (
    IdentityMismatchError,
    ResourceNotFoundError,
    StoreUnavailableError,
    WriteConflictError,
)
from .schemas import EntityRead, EntityReplace

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
ReplaceSchemaType = TypeVar("ReplaceSchemaType", bound=EntityReplace)
ReadSchemaType = TypeVar("ReadSchemaType", bound=EntityRead)

logger = get_logger(__name__)


class EntityCrudService(Generic[ModelType, CreateSchemaType, ReplaceSchemaType, ReadSchemaType]):
    """List, get, create, replace and delete for one entity table.

    Concrete services only bind the model, its FastCRUD instance and its
    read schema:

        class LanguageService(EntityCrudService[Language, LanguageCreate, LanguageReplace, LanguageRead]):
            entity_name = "Language"
            model = Language
            crud = language_crud
            read_schema = LanguageRead

    The session is passed into every call and never stored on the service.
    Every mutating call commits exactly once. Referential integrity is left
    to the store: integrity failures roll the session back and propagate
    unchanged.
    """

    entity_name: str
    model: Type[ModelType]
    crud: FastCRUD
    read_schema: Type[ReadSchemaType]

    def _require_store(self, db: Optional[AsyncSession]) -> AsyncSession:
        if db is None:
            raise StoreUnavailableError(f"Entity set '{self.entity_name}' is not available.")
        return db

    def _not_found(self, entity_id: int) -> ResourceNotFoundError:
        return ResourceNotFoundError(f"{self.entity_name} with ID {entity_id} was not found.")

    async def exists(self, entity_id: int, db: AsyncSession) -> bool:
        """Check whether a row with ``entity_id`` is present."""
        return bool(await self.crud.exists(db=db, id=entity_id))

    async def get_all(
        self,
        db: Optional[AsyncSession],
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[ReadSchemaType]:
        """Get every row of the entity, ordered by id.

        Args:
            db: Database session
            offset: Number of rows to skip
            limit: Maximum number of rows to return, all rows when None

        Returns:
            List of entities
        """
        session = self._require_store(db)
        result = await self.crud.get_multi(
            db=session,
            offset=offset,
            limit=limit,
            sort_columns=DEFAULT_ORDER_COLUMN,
            sort_orders="asc",
            return_total_count=False,
        )
        return [self.read_schema.model_validate(row) for row in result["data"]]

    async def get(self, entity_id: int, db: Optional[AsyncSession]) -> ReadSchemaType:
        """Get a single entity by id.

        Raises:
            ResourceNotFoundError: If no row has ``entity_id``
        """
        session = self._require_store(db)
        row = await self.crud.get(db=session, id=entity_id)
        if row is None:
            raise self._not_found(entity_id)
        return self.read_schema.model_validate(row)

    async def create(self, payload: CreateSchemaType, db: Optional[AsyncSession]) -> ReadSchemaType:
        """Insert a new row and return it with its assigned id.

        Raises:
            IntegrityError: If the store rejects the row (e.g. a dangling foreign key)
        """
        session = self._require_store(db)
        try:
            created = await self.crud.create(
                db=session,
                object=payload,
                schema_to_select=self.read_schema,
                return_as_model=True,
            )
        except IntegrityError:
            await session.rollback()
            logger.warning(f"Store rejected new {self.entity_name}", exc_info=True)
            raise

        entity = self.read_schema.model_validate(created)
        logger.info(f"Created {self.entity_name} {entity.id}")
        return entity

    async def replace(
        self,
        entity_id: int,
        payload: ReplaceSchemaType,
        db: Optional[AsyncSession],
    ) -> ReadSchemaType:
        """Overwrite every column of an existing row.

        There is no merge: every non-identity column takes the payload's
        value, including optional columns left as None.

        Raises:
            IdentityMismatchError: If ``payload.id`` differs from ``entity_id``
            ResourceNotFoundError: If the row does not exist, checked before any
                replacement validation, or vanished mid-write
            WriteConflictError: If the write was invalidated while the row still exists
            IntegrityError: If the store rejects the new values
        """
        session = self._require_store(db)
        if payload.id != entity_id:
            raise IdentityMismatchError("The ID in the URL does not match the ID in the request body.")

        if not await self.exists(entity_id, session):
            raise self._not_found(entity_id)

        await self.validate_replacement(entity_id, payload, session)

        try:
            await self._write_replacement(entity_id, payload, session)
        except StaleDataError:
            if not await self.exists(entity_id, session):
                raise self._not_found(entity_id)
            logger.warning(f"Unresolved write conflict on {self.entity_name} {entity_id}")
            raise WriteConflictError(f"{self.entity_name} with ID {entity_id} was modified by another request.")
        except IntegrityError:
            await session.rollback()
            logger.warning(f"Store rejected replacement of {self.entity_name} {entity_id}", exc_info=True)
            raise

        logger.info(f"Replaced {self.entity_name} {entity_id}")
        return self.read_schema.model_validate(payload.model_dump())

    async def delete(self, entity_id: int, db: Optional[AsyncSession]) -> None:
        """Delete a row by id.

        Raises:
            ResourceNotFoundError: If no row has ``entity_id``
            IntegrityError: If dependent rows still reference it
        """
        session = self._require_store(db)
        if not await self.exists(entity_id, session):
            raise self._not_found(entity_id)

        try:
            await self.crud.delete(db=session, id=entity_id)
        except NoResultFound:
            raise self._not_found(entity_id)
        except IntegrityError:
            await session.rollback()
            logger.warning(f"Store rejected deletion of {self.entity_name} {entity_id}", exc_info=True)
            raise

        logger.info(f"Deleted {self.entity_name} {entity_id}")

    async def validate_replacement(self, entity_id: int, payload: ReplaceSchemaType, db: AsyncSession) -> None:
        """Hook for entity-specific checks run before a replacement is written."""
        return None

    async def _write_replacement(self, entity_id: int, payload: ReplaceSchemaType, db: AsyncSession) -> None:
        values: Dict[str, Any] = payload.model_dump(exclude={"id"})
        model = cast(Any, self.model)
        stmt = (
            update(model)
            .where(model.id == entity_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        result = cast(Any, await db.execute(stmt))
        if result.rowcount != 1:
            await db.rollback()
            raise StaleDataError(
                f"UPDATE statement on table '{model.__tablename__}' expected to update 1 row(s); "
                f"{result.rowcount} were matched."
            )
        await db.commit()
