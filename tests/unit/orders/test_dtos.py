"""Unit tests for order DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.orders.dtos import OrderInput, OrderRecord
from modules.orders.models import Order

pytestmark = pytest.mark.unit


class TestOrderInput:
    def test_sequences_become_tuples(self):
        dto = OrderInput(purchaser_name="Bob", item_ids=[1, 2], quantities=[3, 4])
        assert dto.item_ids == (1, 2)
        assert dto.quantities == (3, 4)

    def test_mismatched_lengths_accepted(self):
        dto = OrderInput(purchaser_name="Bob", item_ids=[1, 1], quantities=[5])
        assert len(dto.item_ids) != len(dto.quantities)

    def test_blank_purchaser_rejected(self):
        with pytest.raises(ValidationError, match="must not be blank"):
            OrderInput(purchaser_name=" ", item_ids=[], quantities=[])

    def test_to_row_uses_lists(self):
        dto = OrderInput(purchaser_name="Bob", item_ids=[1], quantities=[2])
        assert dto.to_row() == {
            "purchaser_name": "Bob",
            "item_ids": [1],
            "quantities": [2],
        }


class TestOrderRecord:
    def test_from_entity(self):
        order = Order.objects.create(
            purchaser_name="Bob", item_ids=[1, 2], quantities=[3, 4]
        )
        record = OrderRecord.from_entity(order)
        assert record.id == order.id
        assert record.item_ids == (1, 2)
        assert record.quantities == (3, 4)

    def test_replaced_with_overwrites_everything(self):
        record = OrderRecord(id=3, purchaser_name="Bob", item_ids=[1], quantities=[1])
        replacement = record.replaced_with(OrderInput(purchaser_name="Alice"))
        assert replacement.id == 3
        assert replacement.purchaser_name == "Alice"
        assert replacement.item_ids == ()
        assert replacement.quantities == ()
