"""API schemas for client registration requests and client and archive responses."""
from pydantic import BaseModel, Field, field_validator


class CreateClientRequest(BaseModel):
    """Request schema for registering a new client."""
    full_name: str = Field(..., min_length=1, description="First name, then last name")
    national_id: str = Field(..., min_length=1, description="National identity card number (CIN)")
    birth_date: str = Field(..., description="Birth date as YYYY-MM-DD")
    license_types: list[str] = Field(default_factory=list, description="Driving license labels held")

    @field_validator("full_name", "national_id", "birth_date")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure fields are not just whitespace."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v.strip()


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    full_name: str
    national_id: str
    birth_date: str
    age: int
    license_types: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class LicenseTypeResponse(BaseModel):
    """Response schema for a license type."""
    id: int
    label: str


class ArchiveExportResponse(BaseModel):
    """Result of writing the client archive."""
    path: str
    exported: int = Field(..., ge=0, description="Number of clients written")


class ArchiveImportResponse(BaseModel):
    """Result of restoring the client archive."""
    path: str
    restored: list[ClientResponse] = Field(default_factory=list, description="Clients created by the import")
