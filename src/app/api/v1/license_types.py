from fastapi import APIRouter, Depends

from src.app.core.services.client_service import ClientService
from src.client.schemas import LicenseTypeResponse
from src.app.api.dependencies import get_client_service
from src.app.api.mappers import to_license_type_response

router = APIRouter(prefix="/license-types", tags=["license-types"])


@router.get("/", response_model=list[LicenseTypeResponse])
async def list_license_types(
    service: ClientService = Depends(get_client_service)
) -> list[LicenseTypeResponse]:
    """List the license types clients can be linked to."""
    license_types = await service.list_license_types()
    return [to_license_type_response(license_type) for license_type in license_types]
