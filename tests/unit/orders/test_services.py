"""Unit tests for OrderService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.core.results import NotFound
from modules.orders.dtos import OrderInput, OrderRecord
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service():
    return OrderService(order_repository=OrderDjangoRepository())


def _dto(**overrides) -> OrderInput:
    fields = {"purchaser_name": "Bob", "item_ids": [1, 2], "quantities": [3, 4]}
    fields.update(overrides)
    return OrderInput(**fields)


class TestWithMockRepository:
    def test_create_passes_row_to_repository(self, mock_repo):
        mock_repo.create.return_value = Order.objects.create(**_dto().to_row())
        service = OrderService(order_repository=mock_repo)

        record = service.create_order(_dto())

        mock_repo.create.assert_called_once_with(
            {"purchaser_name": "Bob", "item_ids": [1, 2], "quantities": [3, 4]}
        )
        assert isinstance(record, OrderRecord)

    def test_update_missing_does_not_write(self, mock_repo):
        mock_repo.get_by_id.return_value = None
        service = OrderService(order_repository=mock_repo)

        assert isinstance(service.update_order(5, _dto()), NotFound)
        mock_repo.replace.assert_not_called()


class TestOrderStore:
    def test_round_trip(self, service):
        created = service.create_order(_dto())
        fetched = service.get_order(created.id)
        assert fetched == created
        assert fetched.item_ids == (1, 2)
        assert fetched.quantities == (3, 4)

    def test_get_missing(self, service):
        result = service.get_order(1)
        assert result == NotFound("Order", 1)

    def test_update_is_full_replacement(self, service):
        created = service.create_order(_dto())
        updated = service.update_order(
            created.id, _dto(purchaser_name="Alice", item_ids=[7], quantities=[1])
        )
        assert updated.id == created.id
        assert updated.purchaser_name == "Alice"
        assert updated.item_ids == (7,)
        assert service.get_order(created.id) == updated

    def test_update_missing_leaves_store_unchanged(self, service):
        service.create_order(_dto())
        assert isinstance(service.update_order(999, _dto()), NotFound)
        assert len(service.list_orders()) == 1

    def test_delete_then_delete_again(self, service):
        created = service.create_order(_dto())
        assert service.delete_order(created.id) == created
        assert isinstance(service.delete_order(created.id), NotFound)

    def test_list_orders(self, service):
        first = service.create_order(_dto(purchaser_name="A"))
        second = service.create_order(_dto(purchaser_name="B"))
        assert service.list_orders() == [first, second]
