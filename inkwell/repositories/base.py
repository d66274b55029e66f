"""Generic repository over SQLModel tables."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from inkwell.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)

type FilterValue = str | int | float | bool | UUID | datetime | None


class BaseRepository[ModelT: SQLModel, CreateSchemaT: BaseModel]:
    """
    Common create/read/delete operations for one table.

    Entity repositories set ``model`` and add their own queries. Writes are
    flushed, not committed: the session owner decides when the unit of work
    ends (see ``commit``).

    Attributes:
        model: The SQLModel table class.
        id_field: Name of the primary key column.
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, schema: CreateSchemaT, **extra: Any) -> ModelT:  # noqa: ANN401
        """
        Insert a row built from a creation schema.

        Args:
            schema: Validated request body.
            **extra: Column values not carried by the schema.

        Returns:
            The stored row.
        """
        data = schema.model_dump(mode="json", exclude_unset=True) | extra
        return await self._add_and_refresh(self.model.model_validate(data))

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        id_column = getattr(self.model, self.id_field)
        result = await self.session.execute(select(self.model).where(id_column == record_id))
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a row by id.

        Raises:
            RecordNotFoundError: If no row has this id.
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(f"{self.model.__name__} with ID {record_id} not found")
        return record

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a row by id.

        Returns:
            True if a row was deleted, False if none matched.
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def exists(self, record_id: UUID) -> bool:
        id_column = getattr(self.model, self.id_field)
        result = await self.session.execute(select(1).where(id_column == record_id).limit(1))
        return result.scalar_one_or_none() is not None

    async def commit(self) -> None:
        """End the unit of work so later readers see the change."""
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise self._integrity_error(e) from e

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a row, flush it and reload server-side defaults.

        Raises:
            DuplicateEntryError: If a unique constraint is violated.
            DatabaseError: For other integrity failures.
            DatabaseConnectionError: If the statement could not be executed.
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(f"Failed to save record: {e}") from e
        return record

    @staticmethod
    def _integrity_error(error: IntegrityError) -> DatabaseError:
        message = str(error.orig) if error.orig else str(error)
        if "unique" in message.lower() or "duplicate" in message.lower():
            return DuplicateEntryError(message)
        return DatabaseError(f"Database integrity error: {message}")

    async def _check_exists_by_field(
        self,
        field_name: str,
        value: FilterValue,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check whether another row already holds a value.

        Args:
            field_name: Column to check.
            value: Value to look for.
            exclude_id: Row to ignore, used when updating that row.
        """
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value)
        if exclude_id is not None:
            statement = statement.where(getattr(self.model, self.id_field) != exclude_id)

        result = await self.session.execute(statement.limit(1))
        return result.scalar_one_or_none() is not None
