from typing import Any

from sqlalchemy import Executable, Result
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    """
    Transaction boundary for writes.

    Entering opens a fresh session. A clean exit commits; an exception rolls back
    every statement issued inside the block and is re-raised.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        """Stage a domain model for insertion and return the entity that will be written."""
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)
        return entity

    async def flush(self):
        """Send pending inserts so store-assigned keys become available."""
        await self.session.flush()

    async def execute(self, statement: Executable) -> Result:
        return await self.session.execute(statement)

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
