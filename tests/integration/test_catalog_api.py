"""Integration tests for the catalog API.

Covers:
- CRUD operations via /api/catalog.
- 404 with empty body for absent ids.
- Full-replacement semantics on PUT.
- Creation and look-up of 100 entries in order.
"""

from __future__ import annotations

import pytest

from modules.catalog.models import CatalogEntry

pytestmark = pytest.mark.integration

URL = "/api/catalog"


def _payload(i: int = 0, **overrides) -> dict:
    payload = {
        "itemName": f"Item{i}",
        "brand": f"Brand{i}",
        "starRating": (i % 5) + 1,
        "price": i,
        "quantity": 10,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def created(api_client):
    response = api_client.post(URL, _payload(), format="json")
    assert response.status_code == 200
    return response.json()


# ===========================================================================
# CREATE
# ===========================================================================


class TestCatalogCreate:
    def test_create_returns_200_with_id(self, api_client):
        response = api_client.post(URL, _payload(), format="json")
        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["itemName"] == "Item0"
        assert data["starRating"] == 1
        assert CatalogEntry.objects.count() == 1

    def test_client_id_is_ignored(self, api_client, created):
        response = api_client.post(URL, _payload(1, id=created["id"]), format="json")
        assert response.status_code == 200
        assert response.json()["id"] != created["id"]

    def test_optional_fields_default_to_null(self, api_client):
        response = api_client.post(URL, {"itemName": "Lamp", "brand": "Lumen"}, format="json")
        data = response.json()
        assert data["starRating"] is None
        assert data["price"] is None
        assert data["quantity"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"brand": "Acme"},
            {"itemName": "Lamp"},
            {"itemName": "   ", "brand": "Acme"},
        ],
    )
    def test_missing_required_field_is_400_and_creates_nothing(self, api_client, payload):
        response = api_client.post(URL, payload, format="json")
        assert response.status_code == 400
        assert CatalogEntry.objects.count() == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"price": 2**63},
            {"quantity": -(2**63) - 1},
            {"starRating": 32768},
        ],
    )
    def test_out_of_range_number_is_400_envelope(self, api_client, overrides):
        response = api_client.post(URL, _payload(**overrides), format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["status"] == 400
        assert data["path"] == URL
        assert next(iter(overrides)) in data["message"]
        assert CatalogEntry.objects.count() == 0

    def test_largest_price_is_accepted(self, api_client):
        response = api_client.post(URL, _payload(price=2**63 - 1), format="json")
        assert response.status_code == 200
        assert response.json()["price"] == 2**63 - 1


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestCatalogRead:
    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_bare_array(self, api_client, created):
        response = api_client.get(URL)
        assert response.json() == [created]

    def test_retrieve_matches_created(self, api_client, created):
        response = api_client.get(f"{URL}/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_retrieve_missing_is_empty_404(self, api_client):
        response = api_client.get(f"{URL}/999")
        assert response.status_code == 404
        assert response.content == b""

    def test_retrieve_non_numeric_is_empty_404(self, api_client):
        response = api_client.get(f"{URL}/abc")
        assert response.status_code == 404
        assert response.content == b""

    def test_hundred_entries_in_creation_order(self, api_client):
        ids = []
        for i in range(100):
            response = api_client.post(URL, _payload(i), format="json")
            ids.append(response.json()["id"])

        for i, entry_id in enumerate(ids):
            response = api_client.get(f"{URL}/{entry_id}")
            assert response.status_code == 200
            assert response.json() == {"id": entry_id, **_payload(i)}


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCatalogUpdate:
    def test_update_replaces_fields(self, api_client, created):
        response = api_client.put(
            f"{URL}/{created['id']}", _payload(7, quantity=1), format="json"
        )
        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **_payload(7, quantity=1)}

    def test_omitted_fields_are_not_preserved(self, api_client, created):
        response = api_client.put(
            f"{URL}/{created['id']}", {"itemName": "Lamp", "brand": "Lumen"}, format="json"
        )
        data = response.json()
        assert data["price"] is None
        assert data["quantity"] is None
        assert data["starRating"] is None

    def test_update_missing_is_empty_404(self, api_client, created):
        response = api_client.put(f"{URL}/999", _payload(), format="json")
        assert response.status_code == 404
        assert response.content == b""
        assert CatalogEntry.objects.count() == 1

    def test_update_invalid_body_is_400(self, api_client, created):
        response = api_client.put(f"{URL}/{created['id']}", {"brand": "X"}, format="json")
        assert response.status_code == 400
        assert CatalogEntry.objects.get(id=created["id"]).item_name == "Item0"

    def test_update_out_of_range_price_is_400_envelope(self, api_client, created):
        path = f"{URL}/{created['id']}"
        response = api_client.put(path, _payload(price=2**63), format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["path"] == path
        assert "price" in data["message"]
        assert CatalogEntry.objects.get(id=created["id"]).price == 0

    def test_patch_not_allowed(self, api_client, created):
        response = api_client.patch(f"{URL}/{created['id']}", {"price": 1}, format="json")
        assert response.status_code == 405


# ===========================================================================
# DELETE
# ===========================================================================


class TestCatalogDelete:
    def test_delete_returns_empty_200(self, api_client, created):
        response = api_client.delete(f"{URL}/{created['id']}")
        assert response.status_code == 200
        assert response.content == b""
        assert not CatalogEntry.objects.filter(id=created["id"]).exists()

    def test_second_delete_is_404(self, api_client, created):
        api_client.delete(f"{URL}/{created['id']}")
        response = api_client.delete(f"{URL}/{created['id']}")
        assert response.status_code == 404
        assert response.content == b""

    def test_get_after_delete_is_404(self, api_client, created):
        api_client.delete(f"{URL}/{created['id']}")
        assert api_client.get(f"{URL}/{created['id']}").status_code == 404
