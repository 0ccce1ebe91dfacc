"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the database."""

    def __init__(self, entity_name: str, entity_key: Any, key_name: str = "ID"):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_key: Lookup value that matched nothing
            key_name: Name of the field used for the lookup
        """
        super().__init__(f"{entity_name} with {key_name} {entity_key} not found")
        self.entity_name = entity_name
        self.entity_key = entity_key
        self.key_name = key_name


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class EntityInUse(Exception):
    """Raised when an entity cannot be removed because something still references it."""

    def __init__(self, entity_name: str, entity_key: Any, reason: str):
        super().__init__(f"Cannot delete {entity_name} {entity_key}: {reason}")
        self.entity_name = entity_name
        self.entity_key = entity_key
        self.reason = reason
