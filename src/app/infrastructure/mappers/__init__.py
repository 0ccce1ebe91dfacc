"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.license_mapper import LicenseTypeMapper, ClientLicenseMapper

__all__ = [
    "ClientMapper",
    "LicenseTypeMapper",
    "ClientLicenseMapper",
]
