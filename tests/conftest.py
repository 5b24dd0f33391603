import pytest

from rest_framework.test import APIClient

from modules.catalog.dtos import CatalogEntryInput
from modules.catalog.repositories.django_repository import CatalogDjangoRepository
from modules.catalog.services import CatalogService


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def catalog_service():
    """CatalogService backed by the Django repository."""
    return CatalogService(repository=CatalogDjangoRepository())


@pytest.fixture()
def make_entry(catalog_service):
    """Factory that persists a catalog entry and returns its record."""

    def _make(**overrides):
        fields = {
            "item_name": "Widget",
            "brand": "Acme",
            "star_rating": 4,
            "price": 1999,
            "quantity": 10,
        }
        fields.update(overrides)
        return catalog_service.create_entry(CatalogEntryInput(**fields))

    return _make
