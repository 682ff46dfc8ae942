"""In-memory implementation of the CatalogStore."""

from musicals.domain import Catalog, Musical, MusicalId, Show, ShowId
from musicals.stores.interfaces import CatalogStore


class InMemoryCatalogStore(CatalogStore):
    """Catalog store backed by a Catalog held in process memory."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def list_musicals(self) -> list[Musical]:
        return self._catalog.list_musicals()

    def get_musical(self, musical_id: MusicalId) -> Musical | None:
        return self._catalog.find_musical(musical_id)

    def get_show(self, musical_id: MusicalId, show_id: ShowId) -> Show | None:
        musical = self._catalog.find_musical(musical_id)
        if musical is None:
            return None
        return musical.find_show(show_id)
