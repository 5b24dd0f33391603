"""Catalog entry model.

A catalog entry is a sellable item definition.  ``quantity`` is a
descriptive stock count: orders never decrement it.

Rules implemented:
- ``item_name`` and ``brand`` are required, non-blank strings.
- ``star_rating``, ``price`` and ``quantity`` are nullable; a full
  replacement that omits them stores ``NULL``.
- Deletion is physical (no soft delete).
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import TimestampedModel

logger = structlog.get_logger(__name__)


class CatalogEntry(TimestampedModel):
    """Catalog aggregate root."""

    item_name = models.CharField(max_length=255)
    brand = models.CharField(max_length=255)
    star_rating = models.SmallIntegerField(null=True, blank=True, default=None)
    price = models.BigIntegerField(null=True, blank=True, default=None)
    quantity = models.BigIntegerField(null=True, blank=True, default=None)

    class Meta(TimestampedModel.Meta):
        db_table = "catalog"
        verbose_name_plural = "catalog entries"

    def __str__(self) -> str:
        return f"{self.brand} - {self.item_name}"
