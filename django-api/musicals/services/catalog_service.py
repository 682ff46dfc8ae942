"""Catalog service - lookups of musicals and shows.

Services:
- Depend only on interfaces (stores)
- Validate identifiers
- Return domain models or raise domain errors
"""

from musicals.domain import Musical, MusicalId, Show, ShowId
from musicals.domain.errors import (
    InvalidMusicalIdError,
    InvalidShowIdError,
    MusicalNotFoundError,
    ShowNotFoundError,
)
from musicals.stores.interfaces import CatalogStore


def parse_musical_id(musical_id: str) -> MusicalId:
    try:
        return MusicalId.from_string(musical_id)
    except (TypeError, ValueError) as exc:
        raise InvalidMusicalIdError() from exc


def parse_show_id(show_id: str) -> ShowId:
    try:
        return ShowId.from_string(show_id)
    except (TypeError, ValueError) as exc:
        raise InvalidShowIdError() from exc


class CatalogService:
    """Service for catalog browsing operations."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def list_musicals(self) -> list[Musical]:
        """Return all musicals."""
        return self._store.list_musicals()

    def get_musical(self, musical_id: str) -> Musical:
        """Return a musical by ID.

        Raises:
            InvalidMusicalIdError: If the musical_id is not a valid UUID.
            MusicalNotFoundError: If the musical does not exist.
        """
        musical = self._store.get_musical(parse_musical_id(musical_id))
        if musical is None:
            raise MusicalNotFoundError(musical_id)
        return musical

    def get_shows_for_musical(self, musical_id: str) -> list[Show]:
        """Return the shows of a musical in schedule order.

        Raises:
            InvalidMusicalIdError: If the musical_id is not a valid UUID.
            MusicalNotFoundError: If the musical does not exist.
        """
        return list(self.get_musical(musical_id).shows)

    def get_show(self, musical_id: str, show_id: str) -> tuple[Musical, Show]:
        """Return a musical together with one of its shows.

        Raises:
            InvalidMusicalIdError: If the musical_id is not a valid UUID.
            InvalidShowIdError: If the show_id is not a valid UUID.
            MusicalNotFoundError: If the musical does not exist.
            ShowNotFoundError: If the show is not part of the musical.
        """
        musical = self.get_musical(musical_id)
        show = self._store.get_show(musical.id, parse_show_id(show_id))
        if show is None:
            raise ShowNotFoundError(show_id)
        return musical, show
