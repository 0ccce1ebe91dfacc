from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import ClientRecord, birth_date_from_age
from src.app.infrastructure.entities.client_entity import ClientEntity


class ClientMapper(BaseEntityMapper[ClientRecord, ClientEntity]):
    """Mapper for converting between ClientRecord domain model and ClientEntity."""

    @staticmethod
    def to_entity(model_instance: ClientRecord) -> ClientEntity:
        """Convert a ClientRecord (domain model) to ClientEntity (database entity)."""
        return ClientEntity(
            id=model_instance.id,
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            national_id=model_instance.national_id,
            age=model_instance.age,
        )

    @staticmethod
    def to_model(entity: ClientEntity) -> ClientRecord:
        """
        Convert a ClientEntity (database entity) to ClientRecord (domain model).

        The users table keeps the age but not the birth date, so the birth date
        is rebuilt as January 1st of the implied birth year.
        """
        return ClientRecord(
            id=entity.id,
            full_name=f"{entity.first_name} {entity.last_name}".strip(),
            national_id=entity.national_id,
            birth_date=birth_date_from_age(entity.age),
            age=entity.age,
            license_types=frozenset(license_type.label for license_type in entity.license_types),
        )
