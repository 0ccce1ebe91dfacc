"""Domain models used in business logic."""
import re
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9 ]+$")
BIRTH_DATE_FORMAT = "%Y-%m-%d"
_BIRTH_DATE_SHAPE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def age_from_birth_date(birth_date: str, today: date | None = None) -> int:
    """Age in whole years, counted from the birth year only."""
    today = today or date.today()
    return today.year - int(birth_date[:4])


def birth_date_from_age(age: int, today: date | None = None) -> str:
    """Rebuild a birth date from a stored age. Month and day are unknown and default to January 1st."""
    today = today or date.today()
    return f"{today.year - age:04d}-01-01"


NAME_PART_MAX_LENGTH = 100
NATIONAL_ID_MAX_LENGTH = 50


def _require_alphanumeric(value: str) -> str:
    value = value.strip()
    if not ALPHANUMERIC_PATTERN.match(value):
        raise ValueError("Only alphanumeric characters and spaces are allowed")
    # Runs of spaces collapse so the stored first/last name split round-trips
    return " ".join(value.split())


class ClientRecord(BaseModel):
    """
    A registered rental client.

    Records are immutable. Two records are the same client when their national
    IDs (CIN) match; the ID is stored upper-cased so the comparison is
    case-insensitive.
    """
    id: int | None = Field(default=None, description="Key assigned by the store")
    full_name: str = Field(..., min_length=1, description="First name, then last name")
    national_id: str = Field(
        ..., min_length=1, max_length=NATIONAL_ID_MAX_LENGTH, description="National identity card number (CIN)"
    )
    birth_date: str = Field(..., description="Birth date as YYYY-MM-DD")
    age: int = Field(..., ge=0, description="Derived from the birth year when omitted")
    license_types: frozenset[str] = Field(default_factory=frozenset, description="Driving license labels held")

    model_config = {"frozen": True, "from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def derive_age(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("age") is None:
            birth_date = data.get("birth_date")
            if isinstance(birth_date, str):
                birth_date = birth_date.strip()
            if isinstance(birth_date, str) and _BIRTH_DATE_SHAPE.match(birth_date):
                data = {**data, "age": age_from_birth_date(birth_date)}
        return data

    @field_validator("full_name", "national_id")
    @classmethod
    def validate_alphanumeric(cls, v: str) -> str:
        return _require_alphanumeric(v)

    @field_validator("full_name")
    @classmethod
    def validate_name_parts_length(cls, v: str) -> str:
        first_name, _, last_name = v.partition(" ")
        if len(first_name) > NAME_PART_MAX_LENGTH or len(last_name) > NAME_PART_MAX_LENGTH:
            raise ValueError(f"First and last name must each be at most {NAME_PART_MAX_LENGTH} characters")
        return v

    @field_validator("national_id")
    @classmethod
    def normalize_national_id(cls, v: str) -> str:
        return v.upper()

    @field_validator("birth_date")
    @classmethod
    def validate_birth_date(cls, v: str) -> str:
        v = v.strip()
        try:
            datetime.strptime(v, BIRTH_DATE_FORMAT)
        except ValueError:
            raise ValueError("Birth date must be a valid date formatted as YYYY-MM-DD") from None
        return v

    @field_validator("license_types", mode="before")
    @classmethod
    def normalize_license_types(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(label.strip() for label in v if label and label.strip())
        return v

    @property
    def first_name(self) -> str:
        return self.full_name.split(" ", 1)[0]

    @property
    def last_name(self) -> str:
        parts = self.full_name.split(" ", 1)
        return parts[1].strip() if len(parts) > 1 else ""

    def with_id(self, client_id: int, license_types: frozenset[str] | None = None) -> "ClientRecord":
        """Copy of this record carrying the store-assigned id (and optionally the persisted licenses)."""
        update: dict[str, Any] = {"id": client_id}
        if license_types is not None:
            update["license_types"] = frozenset(license_types)
        return self.model_copy(update=update)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientRecord):
            return NotImplemented
        return self.national_id == other.national_id

    def __hash__(self) -> int:
        return hash(self.national_id)

    def __str__(self) -> str:
        return (
            f"Name: {self.full_name}\n"
            f"CIN: {self.national_id}\n"
            f"Birth date: {self.birth_date}\n"
            f"Age: {self.age}"
        )


class LicenseType(BaseModel):
    """A kind of driving license a client can hold (e.g. "B")."""
    id: int | None = None
    label: str = Field(..., min_length=1, max_length=20)

    model_config = {"from_attributes": True}

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        return _require_alphanumeric(v)


class ClientLicense(BaseModel):
    """Association between a client and a license type they hold."""
    client_id: int
    license_type_id: int
