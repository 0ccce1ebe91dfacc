from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class LicenseTypeEntity(Base):
    """SQLAlchemy model for the license_types lookup table."""
    __tablename__ = "license_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    label: Mapped[str] = mapped_column(String(20), unique=True, index=True)


class ClientLicenseEntity(Base):
    """SQLAlchemy model for the user_licenses association table."""
    __tablename__ = "user_licenses"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    license_id: Mapped[int] = mapped_column(
        ForeignKey("license_types.id"),
        primary_key=True,
    )
