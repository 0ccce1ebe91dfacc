from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import ClientLicense, LicenseType
from src.app.infrastructure.entities.license_entity import ClientLicenseEntity, LicenseTypeEntity


class LicenseTypeMapper(BaseEntityMapper[LicenseType, LicenseTypeEntity]):
    """Mapper for converting between LicenseType and LicenseTypeEntity."""

    @staticmethod
    def to_entity(model_instance: LicenseType) -> LicenseTypeEntity:
        return LicenseTypeEntity(id=model_instance.id, label=model_instance.label)

    @staticmethod
    def to_model(entity: LicenseTypeEntity) -> LicenseType:
        return LicenseType(id=entity.id, label=entity.label)


class ClientLicenseMapper(BaseEntityMapper[ClientLicense, ClientLicenseEntity]):
    """Mapper for the client/license association rows."""

    @staticmethod
    def to_entity(model_instance: ClientLicense) -> ClientLicenseEntity:
        return ClientLicenseEntity(
            user_id=model_instance.client_id,
            license_id=model_instance.license_type_id,
        )

    @staticmethod
    def to_model(entity: ClientLicenseEntity) -> ClientLicense:
        return ClientLicense(client_id=entity.user_id, license_type_id=entity.license_id)
