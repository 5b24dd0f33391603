"""Order service layer (the order store).

Mirrors the catalog store: create, look up, list, replace and delete
orders.  Callers run ``OrderValidator`` first; this layer performs no
catalog look-ups of its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Union

import structlog
from django.db import transaction

from modules.core.results import NotFound
from modules.orders.dtos import OrderRecord

if TYPE_CHECKING:
    from modules.orders.dtos import OrderInput
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

RESOURCE = "Order"


class OrderService:
    """Application service for order use-cases.

    Receives an ``IOrderRepository`` via constructor injection (DIP).
    """

    def __init__(self, order_repository: IOrderRepository) -> None:
        self._order_repo = order_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderInput) -> OrderRecord:
        """Persist a new order and return it with its assigned id."""
        order = self._order_repo.create(dto.to_row())
        record = OrderRecord.from_entity(order)
        logger.info("order.created", order_id=record.id)
        return record

    @transaction.atomic
    def update_order(self, id: object, dto: OrderInput) -> Union[OrderRecord, NotFound]:
        """Replace purchaser, items and quantities; the id is preserved.

        Fields missing from ``dto`` are not carried over from the stored
        order.
        """
        current = self.get_order(id)
        if isinstance(current, NotFound):
            return current

        replacement = current.replaced_with(dto)
        order = self._order_repo.replace(replacement.id, replacement.to_row())
        if order is None:
            return NotFound(RESOURCE, id)
        logger.info("order.updated", order_id=replacement.id)
        return OrderRecord.from_entity(order)

    @transaction.atomic
    def delete_order(self, id: object) -> Union[OrderRecord, NotFound]:
        """Permanently delete an order, returning the removed record."""
        current = self.get_order(id)
        if isinstance(current, NotFound):
            return current
        if not self._order_repo.delete(current.id):
            return NotFound(RESOURCE, id)
        logger.info("order.deleted", order_id=current.id)
        return current

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, id: object) -> Union[OrderRecord, NotFound]:
        """Retrieve a single order by ID, or ``NotFound``."""
        order = self._order_repo.get_by_id(id)
        if order is None:
            return NotFound(RESOURCE, id)
        return OrderRecord.from_entity(order)

    def list_orders(self) -> List[OrderRecord]:
        return [OrderRecord.from_entity(order) for order in self._order_repo.list()]
