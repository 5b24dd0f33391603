"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Each write
touches a single row inside ``transaction.atomic()``; no lock spans a
validation and the write that follows it.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.orders.models import Order
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    def get_by_id(self, id: object) -> Optional[Order]:
        """Retrieve an order by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Order.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError):
            return None

    def list(self) -> List[Order]:
        return list(Order.objects.all())

    @transaction.atomic
    def create(self, fields: dict) -> Order:
        order = Order.objects.create(**fields)
        logger.info(
            "order.saved", order_id=order.id, item_count=len(order.item_ids)
        )
        return order

    @transaction.atomic
    def replace(self, id: int, fields: dict) -> Optional[Order]:
        updated = Order.objects.filter(id=id).update(
            **fields, updated_at=timezone.now()
        )
        if not updated:
            return None
        logger.info("order.replaced", order_id=id)
        return Order.objects.get(id=id)

    @transaction.atomic
    def delete(self, id: object) -> bool:
        try:
            deleted, _ = Order.objects.filter(id=id).delete()
        except (ValueError, TypeError, OverflowError):
            return False
        if deleted:
            logger.info("order.deleted", order_id=id)
        return bool(deleted)
