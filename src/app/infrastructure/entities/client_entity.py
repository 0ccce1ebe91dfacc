from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for the users table holding rental clients."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100), default="")
    # Stored upper-cased; lookups compare on UPPER() as well
    national_id: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    age: Mapped[int] = mapped_column(Integer)

    # Read-only view over user_licenses; rows are written through ClientLicenseEntity
    license_types: Mapped[list["LicenseTypeEntity"]] = relationship(
        "LicenseTypeEntity",
        secondary="user_licenses",
        lazy="selectin",
        viewonly=True,
        order_by="LicenseTypeEntity.label",
    )
