"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, time

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from musicals.context import BookingContext, build_context
from musicals.domain import Catalog, Musical, Show, ShowId
from musicals.sample_data import build_sample_catalog
from musicals.services.booking_service import BookingService
from musicals.services.catalog_service import CatalogService
from musicals.stores.file_receipt_store import FileReceiptStore
from musicals.stores.memory_store import InMemoryCatalogStore

CATALOG_START = date(2030, 3, 1)
RECEIPT_TIME = datetime(2030, 3, 1, 12, 30, 45)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def show() -> Show:
    return Show(id=ShowId.new(), date=date(2030, 3, 2), time=time(19, 0))


@pytest.fixture
def catalog() -> Catalog:
    return build_sample_catalog(start=CATALOG_START)


@pytest.fixture
def musical(catalog: Catalog) -> Musical:
    return catalog.list_musicals()[0]


@pytest.fixture
def catalog_service(catalog: Catalog) -> CatalogService:
    return CatalogService(InMemoryCatalogStore(catalog))


@pytest.fixture
def receipts_dir(tmp_path):
    return tmp_path / "receipts"


@pytest.fixture
def receipt_store(receipts_dir) -> FileReceiptStore:
    return FileReceiptStore(receipts_dir, clock=lambda: RECEIPT_TIME)


@pytest.fixture
def booking_service(
    catalog_service: CatalogService, receipt_store: FileReceiptStore
) -> BookingService:
    return BookingService(catalog_service, receipt_store)


@pytest.fixture
def booking_context(catalog: Catalog, receipts_dir, monkeypatch) -> BookingContext:
    """Install a fresh context on the musicals app for the API tests."""
    context = build_context(catalog=catalog, receipts_dir=receipts_dir)
    monkeypatch.setattr(apps.get_app_config("musicals"), "context", context)
    return context
