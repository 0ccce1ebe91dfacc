"""Lookup of active rentals, consulted before a client is deleted."""
from abc import ABC, abstractmethod


class RentalChecker(ABC):
    """
    Abstract view over the rental ledger.

    Rentals are managed outside this service; only the question "does this
    client currently hold a vehicle?" is needed here.
    """

    @abstractmethod
    async def has_active_rental(self, national_id: str) -> bool:
        """
        Check whether the client currently has a rental in progress.

        Args:
            national_id: Upper-cased national ID of the client.

        Returns:
            True if deleting the client must be refused.
        """
        pass


class NoActiveRentals(RentalChecker):
    """Checker used when no rental ledger is connected: nobody has an active rental."""

    async def has_active_rental(self, national_id: str) -> bool:
        return False
