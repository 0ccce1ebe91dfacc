"""HTTP client for consuming the Rental Back Office API."""
from typing import Optional
from urllib.parse import quote

from httpx import AsyncClient, Response

from src.client.schemas import (
    ArchiveExportResponse,
    ArchiveImportResponse,
    ClientResponse,
    CreateClientRequest,
    LicenseTypeResponse,
)


class RentalClient:
    """HTTP client for interacting with the Rental Back Office API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the rental client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Register a new client.

        Args:
            request: Client registration request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (409 on a duplicate national ID)
        """
        response: Response = await self.client.post(
            "/api/v1/clients/",
            json=request.model_dump(mode="json")
        )
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def get_client(self, national_id: str) -> ClientResponse:
        """
        Get a client by national ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"/api/v1/clients/{quote(national_id)}")
        response.raise_for_status()
        return ClientResponse(**response.json())

    async def list_clients(self) -> list[ClientResponse]:
        response: Response = await self.client.get("/api/v1/clients/")
        response.raise_for_status()
        return [ClientResponse(**client) for client in response.json()]

    async def delete_client(self, national_id: str) -> None:
        """
        Delete a client by national ID.

        Raises:
            httpx.HTTPStatusError: 404 if not found, 409 if the client has an active rental
        """
        response: Response = await self.client.delete(f"/api/v1/clients/{quote(national_id)}")
        response.raise_for_status()

    async def list_license_types(self) -> list[LicenseTypeResponse]:
        response: Response = await self.client.get("/api/v1/license-types/")
        response.raise_for_status()
        return [LicenseTypeResponse(**license_type) for license_type in response.json()]

    async def export_archive(self) -> ArchiveExportResponse:
        """Ask the server to write all clients to its archive file."""
        response: Response = await self.client.post("/api/v1/archive/export")
        response.raise_for_status()
        return ArchiveExportResponse(**response.json())

    async def import_archive(self) -> ArchiveImportResponse:
        """Ask the server to register the clients listed in its archive file."""
        response: Response = await self.client.post("/api/v1/archive/import")
        response.raise_for_status()
        return ArchiveImportResponse(**response.json())
