"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class LicenseSettings(BaseModel):
    """
    Driving license types known to the back office.

    default_labels are inserted into license_types at startup if missing.
    Clients can only be linked to labels present in that table.
    """

    default_labels: list[str] = ["A", "B", "C", "D", "E"]


class ArchiveSettings(BaseModel):
    """Flat-file client archive location and encoding."""

    path: str = "clients.txt"
    encoding: str = "utf-8"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: ARCHIVE__PATH=/var/backups/clients.txt, LICENSES__DEFAULT_LABELS='["A","B"]'
    """

    # Application metadata
    app_name: str = "Rental Back Office API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/rental"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Nested settings groups
    licenses: LicenseSettings = LicenseSettings()
    archive: ArchiveSettings = ArchiveSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
