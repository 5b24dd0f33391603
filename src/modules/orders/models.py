"""Order model.

An order references catalog entries by id with positionally paired
quantities (``item_ids[i]`` is purchased in amount ``quantities[i]``).
Both sequences are stored as JSON arrays on the order row, so a full
replacement is a single-row UPDATE.

Referential integrity against the catalog is checked by
``modules.orders.validation`` before the row is written; the row itself
holds no foreign keys.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)


class Order(TimestampedModel):
    """Order aggregate root."""

    purchaser_name = models.CharField(max_length=255)
    item_ids = models.JSONField(default=list)
    quantities = models.JSONField(default=list)

    class Meta(TimestampedModel.Meta):
        db_table = "orders"

    def __str__(self) -> str:
        return f"Order {self.id} ({self.purchaser_name})"
