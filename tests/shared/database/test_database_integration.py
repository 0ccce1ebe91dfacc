import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from src.shared.database.unit_of_work import UnitOfWork
from tests.shared.database.mock_entities import VehicleEntity, VehicleModel, VehicleMapper, get_test_entity_mapper
from tests.shared.database.mock_repository import VehicleRepository


@pytest.fixture
def vehicle_repository(clean_database):
    """Create a vehicle repository."""
    return VehicleRepository(clean_database, VehicleMapper())


@pytest.fixture
def unit_of_work(clean_database):
    """Create a unit of work."""
    return UnitOfWork(clean_database, get_test_entity_mapper())


@pytest.mark.asyncio
async def test_persist_via_unit_of_work_assigns_id(unit_of_work, vehicle_repository):
    # Act
    async with unit_of_work:
        entity = unit_of_work.add(VehicleModel(plate="12345-A-6", category="B"))
        await unit_of_work.flush()
        assigned_id = entity.id

    # Assert
    assert assigned_id is not None
    retrieved = await vehicle_repository.get_by_id(assigned_id)
    assert retrieved is not None
    assert retrieved.plate == "12345-A-6"
    assert retrieved.category == "B"


@pytest.mark.asyncio
async def test_retrieve_via_repository(unit_of_work, vehicle_repository):
    async with unit_of_work:
        unit_of_work.add(VehicleModel(plate="B-2", category="B"))
        unit_of_work.add(VehicleModel(plate="A-1", category="A"))

    assert (await vehicle_repository.get_by_plate("A-1")).category == "A"
    assert [vehicle.plate for vehicle in await vehicle_repository.get_all()] == ["B-2", "A-1"]
    assert await vehicle_repository.get_plates() == ["A-1", "B-2"]


@pytest.mark.asyncio
async def test_execute_statement_in_unit_of_work(unit_of_work, vehicle_repository):
    async with unit_of_work:
        unit_of_work.add(VehicleModel(plate="A-1", category="A"))
        unit_of_work.add(VehicleModel(plate="B-2", category="B"))

    async with unit_of_work:
        await unit_of_work.execute(delete(VehicleEntity).where(VehicleEntity.plate == "A-1"))

    assert await vehicle_repository.get_plates() == ["B-2"]


@pytest.mark.asyncio
async def test_rollback_on_error(unit_of_work, vehicle_repository):
    """Changes made before the error are discarded, including flushed ones."""
    with pytest.raises(ValueError):
        async with unit_of_work:
            unit_of_work.add(VehicleModel(plate="A-1", category="A"))
            await unit_of_work.flush()
            raise ValueError("Simulated error")

    assert await vehicle_repository.get_all() == []


@pytest.mark.asyncio
async def test_constraint_violation_on_commit_rolls_back(unit_of_work, vehicle_repository):
    async with unit_of_work:
        unit_of_work.add(VehicleModel(plate="A-1", category="A"))

    with pytest.raises(IntegrityError):
        async with unit_of_work:
            unit_of_work.add(VehicleModel(plate="Z-9", category="B"))
            unit_of_work.add(VehicleModel(plate="A-1", category="B"))

    assert await vehicle_repository.get_plates() == ["A-1"]


@pytest.mark.asyncio
async def test_unmapped_model_is_rejected(unit_of_work):
    with pytest.raises(ValueError, match="No entity mapping"):
        async with unit_of_work:
            unit_of_work.add(object())


@pytest.mark.asyncio
async def test_get_nonexistent(vehicle_repository):
    assert await vehicle_repository.get_by_id(42) is None
