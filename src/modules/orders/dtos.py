"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2, frozen so
that an update yields a new record instead of mutating one.

- ``OrderInput``: fields supplied on create and on full replace.
- ``OrderRecord``: a stored order, including its identifier.

``OrderInput`` accepts item/quantity sequences of different lengths;
the mismatch is reported by ``OrderValidator``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.orders.models import Order


class OrderInput(BaseModel):
    """Immutable DTO for order create / replace requests."""

    model_config = ConfigDict(frozen=True)

    purchaser_name: str
    item_ids: Tuple[int, ...] = ()
    quantities: Tuple[int, ...] = ()

    @field_validator("purchaser_name")
    @classmethod
    def purchaser_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank.")
        return v.strip()

    def to_row(self) -> dict:
        """Column values for the ``orders`` table."""
        return {
            "purchaser_name": self.purchaser_name,
            "item_ids": list(self.item_ids),
            "quantities": list(self.quantities),
        }


class OrderRecord(OrderInput):
    """Immutable view of a stored order."""

    id: int

    @classmethod
    def from_entity(cls, order: Order) -> OrderRecord:
        """Build a record from an Order model instance."""
        return cls(
            id=order.id,
            purchaser_name=order.purchaser_name,
            item_ids=tuple(order.item_ids),
            quantities=tuple(order.quantities),
        )

    def replaced_with(self, fields: OrderInput) -> OrderRecord:
        """Return a new record carrying this id and every field of ``fields``."""
        return OrderRecord(id=self.id, **fields.model_dump())
