from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.app.core.services.client_service import ClientService
from src.app.core.domain.exceptions import (
    ActiveRentalError,
    ClientValidationError,
    DuplicateIdError,
    NotFoundError,
)
from src.client.schemas import CreateClientRequest, ClientResponse
from src.app.api.dependencies import get_client_service
from src.app.api.mappers import to_client_response
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    request: CreateClientRequest,
    service: ClientService = Depends(get_client_service)
) -> ClientResponse:
    """Register a new client."""
    try:
        client = await service.create_client(
            full_name=request.full_name,
            national_id=request.national_id,
            birth_date=request.birth_date,
            license_types=request.license_types,
        )
        return to_client_response(client)
    except DuplicateIdError as e:
        logger.error(f"Failed to create client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ClientValidationError as e:
        logger.error(f"Failed to create client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/", response_model=list[ClientResponse])
async def list_clients(
    service: ClientService = Depends(get_client_service)
) -> list[ClientResponse]:
    """List all registered clients."""
    clients = await service.list_clients()
    return [to_client_response(client) for client in clients]


@router.get("/{national_id}", response_model=ClientResponse)
async def get_client(
    national_id: str,
    service: ClientService = Depends(get_client_service)
) -> ClientResponse:
    """Get a client by national ID."""
    try:
        client = await service.get_client_by_national_id(national_id)
        return to_client_response(client)
    except NotFoundError as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{national_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    national_id: str,
    service: ClientService = Depends(get_client_service)
) -> Response:
    """Delete a client by national ID."""
    try:
        await service.delete_client(national_id)
    except NotFoundError as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ActiveRentalError as e:
        logger.error(f"Refused to delete client: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
