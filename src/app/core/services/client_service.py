"""Client service: registration, lookup and removal of rental clients."""
import logging
from typing import Iterable

from pydantic import ValidationError
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from src.app.core.domain.exceptions import (
    ActiveRentalError,
    ClientValidationError,
    DuplicateIdError,
    NotFoundError,
)
from src.app.core.domain.models import ClientLicense, ClientRecord, LicenseType
from src.app.core.services.rental_checker import NoActiveRentals, RentalChecker
from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.license_entity import ClientLicenseEntity
from src.app.infrastructure.license_type_repository import LicenseTypeRepository
from src.shared.database.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "client"
        messages.append(f"{field}: {detail['msg']}")
    return "; ".join(messages)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(
        self,
        repository: ClientRepository,
        license_type_repository: LicenseTypeRepository,
        unit_of_work: UnitOfWork,
        rental_checker: RentalChecker | None = None,
    ):
        """
        Initialize the client service.

        Args:
            repository: Read access to clients
            license_type_repository: Read access to the license type lookup table
            unit_of_work: Unit of work for database transactions
            rental_checker: Consulted before deletion. Defaults to a checker that reports no rentals.
        """
        self.repository = repository
        self.license_type_repository = license_type_repository
        self.unit_of_work = unit_of_work
        self.rental_checker = rental_checker or NoActiveRentals()

    async def create_client(
        self,
        full_name: str,
        national_id: str,
        birth_date: str,
        license_types: Iterable[str] = (),
    ) -> ClientRecord:
        """
        Register a new client.

        The client row and its license associations are written in one
        transaction. License labels missing from the license_types table are
        skipped, so the returned record lists only the licenses actually stored.

        Raises:
            ClientValidationError: If a field is malformed
            DuplicateIdError: If the national ID is already registered
        """
        try:
            record = ClientRecord(
                full_name=full_name,
                national_id=national_id,
                birth_date=birth_date,
                license_types=list(license_types),
            )
        except ValidationError as e:
            raise ClientValidationError(_describe_validation_error(e)) from e

        if await self.repository.get_by_national_id(record.national_id) is not None:
            raise DuplicateIdError(record.national_id)

        known_types = await self.license_type_repository.get_by_labels(record.license_types)
        known_labels = {license_type.label for license_type in known_types}
        unknown_labels = record.license_types - known_labels
        if unknown_labels:
            logger.warning(
                "Ignoring unknown license types %s for client %s",
                sorted(unknown_labels),
                record.national_id,
            )

        # Database still enforces uniqueness if another writer got there first
        try:
            async with self.unit_of_work:
                entity = self.unit_of_work.add(record)
                await self.unit_of_work.flush()
                for license_type in known_types:
                    self.unit_of_work.add(
                        ClientLicense(client_id=entity.id, license_type_id=license_type.id)
                    )
        except IntegrityError as e:
            # Only a national ID that now exists is a duplicate; other constraint failures propagate
            if await self.repository.get_by_national_id(record.national_id) is not None:
                raise DuplicateIdError(record.national_id) from e
            raise

        created = record.with_id(entity.id, frozenset(known_labels))
        logger.info("Registered client %s with id %s", created.national_id, created.id)
        return created

    async def get_client(self, client_id: int) -> ClientRecord:
        """Get a client by store-assigned ID."""
        client = await self.repository.get_by_id(client_id)
        if not client:
            raise NotFoundError(client_id, key_name="ID")
        return client

    async def get_client_by_national_id(self, national_id: str) -> ClientRecord:
        """Get a client by national ID, ignoring case."""
        client = await self.repository.get_by_national_id(national_id)
        if not client:
            raise NotFoundError(national_id.strip().upper())
        return client

    async def list_clients(self) -> list[ClientRecord]:
        """All registered clients, oldest first."""
        return await self.repository.list_all()

    async def delete_client(self, national_id: str) -> ClientRecord:
        """
        Delete a client and its license associations.

        Raises:
            NotFoundError: If no client has this national ID
            ActiveRentalError: If the client currently has a rental
        """
        client = await self.get_client_by_national_id(national_id)
        if await self.rental_checker.has_active_rental(client.national_id):
            raise ActiveRentalError(client.national_id)

        async with self.unit_of_work:
            await self.unit_of_work.execute(
                delete(ClientLicenseEntity).where(ClientLicenseEntity.user_id == client.id)
            )
            await self.unit_of_work.execute(
                delete(ClientEntity).where(ClientEntity.id == client.id)
            )

        logger.info("Deleted client %s (id %s)", client.national_id, client.id)
        return client

    async def list_license_types(self) -> list[LicenseType]:
        return await self.license_type_repository.list_all()

    async def ensure_license_types(self, labels: Iterable[str]) -> list[LicenseType]:
        """Insert any missing license labels and return the full list. Safe to call repeatedly."""
        existing = set(await self.license_type_repository.list_labels())
        missing = []
        for label in labels:
            license_type = LicenseType(label=label)
            if license_type.label not in existing:
                existing.add(license_type.label)
                missing.append(license_type)

        if missing:
            async with self.unit_of_work:
                for license_type in missing:
                    self.unit_of_work.add(license_type)
            logger.info("Seeded license types: %s", ", ".join(lt.label for lt in missing))

        return await self.license_type_repository.list_all()
