"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from musicals.domain import Musical, MusicalId, Order, Show, ShowId


class CatalogStore(ABC):
    """Interface for catalog lookups."""

    @abstractmethod
    def list_musicals(self) -> list[Musical]:
        """Return all musicals in catalog order."""
        ...

    @abstractmethod
    def get_musical(self, musical_id: MusicalId) -> Musical | None:
        """Return a musical by ID, or None if not found."""
        ...

    @abstractmethod
    def get_show(self, musical_id: MusicalId, show_id: ShowId) -> Show | None:
        """Return a show of a musical, or None if either is unknown."""
        ...


class ReceiptStore(ABC):
    """Interface for persisting order receipts."""

    @abstractmethod
    def save(self, order: Order) -> str:
        """Store a receipt for the order and return where it was written.

        Raises:
            ReceiptWriteFailedError: If the receipt could not be stored.
        """
        ...
