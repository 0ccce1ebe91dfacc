"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.license_mapper import LicenseTypeMapper, ClientLicenseMapper

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.license_type_repository import LicenseTypeRepository

from src.app.core.services.client_service import ClientService
from src.app.core.services.client_archive import ClientFileArchive
from src.app.core.services.rental_checker import NoActiveRentals

from src.app.core.domain.models import ClientRecord, LicenseType, ClientLicense


def create_entity_mapper(
    client_mapper: ClientMapper,
    license_type_mapper: LicenseTypeMapper,
    client_license_mapper: ClientLicenseMapper,
) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            ClientRecord: client_mapper.to_entity,
            LicenseType: license_type_mapper.to_entity,
            ClientLicense: client_license_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)
    license_type_mapper = providers.Singleton(LicenseTypeMapper)
    client_license_mapper = providers.Singleton(ClientLicenseMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        client_mapper=client_mapper,
        license_type_mapper=license_type_mapper,
        client_license_mapper=client_license_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # SINGLETON - Rental ledger lookup (override to plug in a real ledger)
    # =========================================================================
    rental_checker = providers.Singleton(NoActiveRentals)

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    license_type_repository = providers.Factory(
        LicenseTypeRepository,
        db=database,
        mapper=license_type_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        license_type_repository=license_type_repository,
        unit_of_work=unit_of_work,
        rental_checker=rental_checker,
    )

    client_archive = providers.Factory(
        ClientFileArchive,
        client_service=client_service,
        encoding=config.provided.archive.encoding,
    )
