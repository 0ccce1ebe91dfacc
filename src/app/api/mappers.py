"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import ClientRecord, LicenseType
from src.client.schemas import ClientResponse, LicenseTypeResponse


def to_client_response(client: ClientRecord) -> ClientResponse:
    """
    Convert a ClientRecord domain model to ClientResponse API schema.

    Args:
        client: Domain model, already persisted

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        full_name=client.full_name,
        national_id=client.national_id,
        birth_date=client.birth_date,
        age=client.age,
        license_types=sorted(client.license_types),
    )


def to_license_type_response(license_type: LicenseType) -> LicenseTypeResponse:
    return LicenseTypeResponse(id=license_type.id, label=license_type.label)
