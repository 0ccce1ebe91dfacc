"""Domain errors raised by client operations."""
from src.shared.exceptions import ConflictingEntityFound, EntityInUse, EntityNotFound


class DuplicateIdError(ConflictingEntityFound):
    """A client with the same national ID (CIN) is already registered."""

    def __init__(self, national_id: str):
        super().__init__("Client", "national ID", national_id)
        self.national_id = national_id


class NotFoundError(EntityNotFound):
    """No client matches the lookup key."""

    def __init__(self, key, key_name: str = "national ID"):
        super().__init__("Client", key, key_name=key_name)


class ClientValidationError(ValueError):
    """Client input failed validation (bad characters, blank fields, bad birth date)."""


class ActiveRentalError(EntityInUse):
    """The client still has an active rental and cannot be deleted."""

    def __init__(self, national_id: str):
        super().__init__("Client", national_id, "client has an active rental")
        self.national_id = national_id
