from typing import Iterable

from sqlalchemy import select

from src.app.core.domain.models import LicenseType
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.license_entity import LicenseTypeEntity
from src.app.infrastructure.mappers.license_mapper import LicenseTypeMapper


class LicenseTypeRepository(BaseRepository[LicenseTypeEntity, LicenseType]):
    """Repository for the license type lookup table."""

    def __init__(self, db: Database, mapper: LicenseTypeMapper):
        super().__init__(db, mapper)

    async def list_all(self) -> list[LicenseType]:
        return await self.find_all(
            select(LicenseTypeEntity).order_by(LicenseTypeEntity.label)
        )

    async def get_by_labels(self, labels: Iterable[str]) -> list[LicenseType]:
        """License types whose label is in `labels`. Unknown labels are simply absent from the result."""
        labels = list(labels)
        if not labels:
            return []
        return await self.find_all(
            select(LicenseTypeEntity)
            .where(LicenseTypeEntity.label.in_(labels))
            .order_by(LicenseTypeEntity.label)
        )

    async def list_labels(self) -> list[str]:
        return await self.find_scalars(
            select(LicenseTypeEntity.label).order_by(LicenseTypeEntity.label)
        )
