"""
Base Repository for College Match

Shared primary-key lookup, create/update and count for one table.
Table-specific queries live in the concrete repositories.
"""

from typing import TypeVar, Generic, Optional, Type
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel


ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=SQLModel)


class BaseRepository(Generic[ModelType, CreateSchemaType]):
    """
    Generic async repository bound to one SQLModel table.

    Writes are flushed, never committed: the session owner decides
    when the unit of work ends.
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self._model = model
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """Primary key lookup, None when the row does not exist."""
        return await self._session.get(self._model, id)

    async def create(self, data: CreateSchemaType) -> ModelType:
        """Insert a row built from a create schema and return it refreshed."""
        db_obj = self._model.model_validate(data)
        return await self._save(db_obj)

    async def update(self, db_obj: ModelType, data: CreateSchemaType) -> ModelType:
        """Overwrite every field present in `data` on an existing row."""
        for field, value in data.model_dump().items():
            setattr(db_obj, field, value)
        return await self._save(db_obj)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._model)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _save(self, db_obj: ModelType) -> ModelType:
        self._session.add(db_obj)
        await self._session.flush()
        await self._session.refresh(db_obj)
        return db_obj
