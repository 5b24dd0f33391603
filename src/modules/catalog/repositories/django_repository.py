"""Django ORM implementation of the Catalog repository.

Satisfies ``ICatalogRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions, and the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.catalog.models import CatalogEntry
from modules.catalog.repositories.interfaces import ICatalogRepository

logger = structlog.get_logger(__name__)


class CatalogDjangoRepository(ICatalogRepository):
    """Concrete Catalog repository backed by Django ORM."""

    def get_by_id(self, id: object) -> Optional[CatalogEntry]:
        """Retrieve a catalog entry by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return CatalogEntry.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError):
            return None

    def list(self) -> List[CatalogEntry]:
        return list(CatalogEntry.objects.all())

    @transaction.atomic
    def create(self, fields: dict) -> CatalogEntry:
        entry = CatalogEntry.objects.create(**fields)
        logger.info("catalog_entry.saved", entry_id=entry.id)
        return entry

    @transaction.atomic
    def bulk_create(self, rows: List[dict]) -> List[CatalogEntry]:
        # Saved one by one so every backend hands back the assigned ids.
        entries = [CatalogEntry.objects.create(**row) for row in rows]
        logger.info("catalog_entry.bulk_saved", count=len(entries))
        return entries

    @transaction.atomic
    def replace(self, id: int, fields: dict) -> Optional[CatalogEntry]:
        """Overwrite all mutable columns of one row in a single UPDATE."""
        updated = CatalogEntry.objects.filter(id=id).update(
            **fields, updated_at=timezone.now()
        )
        if not updated:
            return None
        logger.info("catalog_entry.replaced", entry_id=id)
        return CatalogEntry.objects.get(id=id)

    @transaction.atomic
    def delete(self, id: object) -> bool:
        """Permanently delete a catalog entry.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = CatalogEntry.objects.filter(id=id).delete()
        except (ValueError, TypeError, OverflowError):
            return False
        if deleted:
            logger.info("catalog_entry.deleted", entry_id=id)
        return bool(deleted)

    def count(self) -> int:
        return CatalogEntry.objects.count()
