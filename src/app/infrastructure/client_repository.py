from typing import Optional
from sqlalchemy import select, func

from src.app.core.domain.models import ClientRecord
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper


class ClientRepository(BaseRepository[ClientEntity, ClientRecord]):
    """Repository for reading clients and their license associations."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, client_id: int) -> Optional[ClientRecord]:
        """Get a client by store-assigned ID."""
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def get_by_national_id(self, national_id: str) -> Optional[ClientRecord]:
        """Get a client by national ID, ignoring case."""
        return await self.find_one(
            select(ClientEntity).where(func.upper(ClientEntity.national_id) == national_id.strip().upper())
        )

    async def list_all(self) -> list[ClientRecord]:
        """All clients in registration order."""
        return await self.find_all(
            select(ClientEntity).order_by(ClientEntity.id)
        )
