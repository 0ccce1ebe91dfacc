"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.entities.license_entity import LicenseTypeEntity, ClientLicenseEntity

__all__ = [
    "ClientEntity",
    "LicenseTypeEntity",
    "ClientLicenseEntity",
]
