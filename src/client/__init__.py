from src.client.rental_client import RentalClient
from src.client.schemas import (
    ArchiveExportResponse,
    ArchiveImportResponse,
    ClientResponse,
    CreateClientRequest,
    LicenseTypeResponse,
)

__all__ = [
    "RentalClient",
    "ArchiveExportResponse",
    "ArchiveImportResponse",
    "ClientResponse",
    "CreateClientRequest",
    "LicenseTypeResponse",
]
