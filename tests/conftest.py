"""Shared test fixtures and utilities for all tests."""
import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from src.app.config import get_settings
from src.app.containers import Container
from src.app.core.services.rental_checker import RentalChecker
from src.client import RentalClient
from src.shared.database.database import Database, DatabaseSettings

TEST_LICENSE_LABELS = ["A", "B", "C", "D"]


class FakeRentalChecker(RentalChecker):
    """Rental ledger stand-in: the given national IDs have a rental in progress."""

    def __init__(self, national_ids: set[str] | None = None):
        self.national_ids = {national_id.upper() for national_id in national_ids or set()}

    async def has_active_rental(self, national_id: str) -> bool:
        return national_id.upper() in self.national_ids


@pytest.fixture
def async_db_url(tmp_path):
    """A fresh SQLite database file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'rental.db'}"


@pytest.fixture
def archive_path(tmp_path):
    return tmp_path / "clients.txt"


@pytest.fixture
def test_settings_override(async_db_url, archive_path, monkeypatch):
    """
    Centralized settings override for all test configurations.

    This fixture manages all environment variable overrides needed for testing,
    providing a single place to configure test settings.
    """
    monkeypatch.setenv("DATABASE_URL", async_db_url)
    monkeypatch.setenv("ARCHIVE__PATH", str(archive_path))

    # Clear settings cache to force reload with new env vars
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def db(async_db_url):
    """
    Create database instance with test database.
    Function-scoped for test isolation.
    """
    db = Database(DatabaseSettings(db_url=async_db_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture(scope="function")
async def clean_database(db):
    """
    Clean the database before each test.
    Drops and recreates all tables.
    """
    await db.drop_all()
    await db.create_all()
    yield db


@pytest.fixture
def rental_checker():
    return FakeRentalChecker()


@pytest.fixture(scope="function")
def test_container(test_settings_override, clean_database, rental_checker):
    """
    Create a test container with database override for proper test isolation.
    Function-scoped to ensure each test gets a fresh container.

    Overrides the container's database singleton with the test database instance
    and the rental ledger with a fake one.
    """
    container = Container()
    container.database.override(providers.Object(clean_database))
    container.rental_checker.override(providers.Object(rental_checker))
    yield container
    container.rental_checker.reset_override()
    container.database.reset_override()


@pytest_asyncio.fixture
async def license_types(test_container):
    """Seed the license type lookup table."""
    return await test_container.client_service().ensure_license_types(TEST_LICENSE_LABELS)


@pytest_asyncio.fixture(scope="function")
async def test_app(test_container, license_types):
    """
    Create test application with container.
    Function-scoped for test isolation.
    """
    from contextlib import asynccontextmanager
    from fastapi import FastAPI
    from src.app.main import create_app

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Tables and license types are already created by the fixtures
        yield

    yield create_app(test_container, lifespan=lifespan)


@pytest_asyncio.fixture
async def rental_client(test_app):
    """Create an API client for testing, talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    http_client = AsyncClient(transport=transport, base_url="http://test")
    client = RentalClient(base_url="http://test", client=http_client)

    async with client:
        yield client

    await http_client.aclose()


# =========================================================================
# Common repository and service fixtures (available to all test directories)
# =========================================================================

@pytest.fixture
def client_repository(test_container):
    """Get client repository from container."""
    return test_container.client_repository()


@pytest.fixture
def license_type_repository(test_container):
    """Get license type repository from container."""
    return test_container.license_type_repository()


@pytest.fixture
def unit_of_work(test_container):
    """Get unit of work from container."""
    return test_container.unit_of_work()


@pytest.fixture
def client_service(test_container):
    """Get client service from container."""
    return test_container.client_service()


@pytest.fixture
def client_archive(test_container):
    """Get client file archive from container."""
    return test_container.client_archive()
