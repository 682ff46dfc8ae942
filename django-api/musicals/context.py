"""Application context: the catalog and the services built on it."""

from dataclasses import dataclass
from pathlib import Path

from django.conf import settings

from musicals.domain import Catalog
from musicals.sample_data import build_sample_catalog
from musicals.services.booking_service import BookingService
from musicals.services.catalog_service import CatalogService
from musicals.stores.file_receipt_store import FileReceiptStore
from musicals.stores.memory_store import InMemoryCatalogStore


@dataclass(frozen=True)
class BookingContext:
    """Everything the handlers need, built once per process."""

    catalog: Catalog
    catalog_service: CatalogService
    booking_service: BookingService


def build_context(
    catalog: Catalog | None = None,
    receipts_dir: Path | None = None,
) -> BookingContext:
    if catalog is None:
        catalog = build_sample_catalog()
    if receipts_dir is None:
        receipts_dir = Path(settings.MUSICALS_RECEIPTS_DIR)

    catalog_service = CatalogService(InMemoryCatalogStore(catalog))
    booking_service = BookingService(catalog_service, FileReceiptStore(receipts_dir))
    return BookingContext(
        catalog=catalog,
        catalog_service=catalog_service,
        booking_service=booking_service,
    )
