from fastapi import APIRouter, Depends

from src.app.config import Settings
from src.app.core.services.client_archive import ClientFileArchive
from src.client.schemas import ArchiveExportResponse, ArchiveImportResponse
from src.app.api.dependencies import get_app_settings, get_client_archive
from src.app.api.mappers import to_client_response
from src.app.logging import get_logger

router = APIRouter(prefix="/archive", tags=["archive"])
logger = get_logger(__name__)


@router.post("/export", response_model=ArchiveExportResponse)
async def export_clients(
    archive: ClientFileArchive = Depends(get_client_archive),
    settings: Settings = Depends(get_app_settings),
) -> ArchiveExportResponse:
    """Write every stored client to the configured archive file."""
    path = settings.archive.path
    exported = await archive.export_all(path)
    return ArchiveExportResponse(path=path, exported=exported)


@router.post("/import", response_model=ArchiveImportResponse)
async def import_clients(
    archive: ClientFileArchive = Depends(get_client_archive),
    settings: Settings = Depends(get_app_settings),
) -> ArchiveImportResponse:
    """Register the clients listed in the configured archive file, skipping duplicates and bad lines."""
    path = settings.archive.path
    restored = await archive.restore(path)
    logger.info(f"Archive import from {path} created {len(restored)} clients")
    return ArchiveImportResponse(
        path=path,
        restored=[to_client_response(client) for client in restored],
    )
