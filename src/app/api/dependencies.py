"""FastAPI dependency providers backed by the application's DI container."""
from fastapi import Depends, Request

from src.app.config import Settings
from src.app.containers import Container
from src.app.core.services.client_archive import ClientFileArchive
from src.app.core.services.client_service import ClientService


def get_container(request: Request) -> Container:
    """Get the container attached to the running application."""
    return request.app.state.container


def get_app_settings(container: Container = Depends(get_container)) -> Settings:
    """Get the settings the container was built with."""
    return container.config()


def get_client_service(container: Container = Depends(get_container)) -> ClientService:
    """Get Client service instance."""
    return container.client_service()


def get_client_archive(container: Container = Depends(get_container)) -> ClientFileArchive:
    """Get client file archive instance."""
    return container.client_archive()
