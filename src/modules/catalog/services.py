"""Catalog service layer (the catalog store).

Owns catalog entry identity and persistence, delegating storage to the
injected ``ICatalogRepository``.  Every query returns immutable
``CatalogEntryRecord`` values; absent entries are reported as
``NotFound`` rather than ``None`` or an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Union

import structlog
from django.db import transaction

from modules.catalog.dtos import CatalogEntryRecord
from modules.core.results import NotFound

if TYPE_CHECKING:
    from modules.catalog.dtos import CatalogEntryInput
    from modules.catalog.repositories.interfaces import ICatalogRepository

logger = structlog.get_logger(__name__)

RESOURCE = "Catalog entry"


class CatalogService:
    """Application service for catalog use-cases.

    Receives an ``ICatalogRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICatalogRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_entry(self, dto: CatalogEntryInput) -> CatalogEntryRecord:
        """Persist a new entry and return it with its assigned id."""
        entry = self._repo.create(dto.model_dump())
        record = CatalogEntryRecord.from_entity(entry)
        logger.info("catalog_entry.created", entry_id=record.id)
        return record

    @transaction.atomic
    def create_entries(
        self, dtos: Iterable[CatalogEntryInput]
    ) -> List[CatalogEntryRecord]:
        """Bulk-create entries atomically (used for seeding)."""
        entries = self._repo.bulk_create([dto.model_dump() for dto in dtos])
        return [CatalogEntryRecord.from_entity(entry) for entry in entries]

    @transaction.atomic
    def update_entry(
        self, id: object, dto: CatalogEntryInput
    ) -> Union[CatalogEntryRecord, NotFound]:
        """Replace every field of an existing entry, preserving its id."""
        current = self.get_entry(id)
        if isinstance(current, NotFound):
            return current

        replacement = current.replaced_with(dto)
        entry = self._repo.replace(
            replacement.id, replacement.model_dump(exclude={"id"})
        )
        if entry is None:
            return NotFound(RESOURCE, id)
        logger.info("catalog_entry.updated", entry_id=replacement.id)
        return CatalogEntryRecord.from_entity(entry)

    @transaction.atomic
    def delete_entry(self, id: object) -> Union[CatalogEntryRecord, NotFound]:
        """Permanently delete an entry, returning the removed record."""
        current = self.get_entry(id)
        if isinstance(current, NotFound):
            return current
        if not self._repo.delete(current.id):
            return NotFound(RESOURCE, id)
        logger.info("catalog_entry.deleted", entry_id=current.id)
        return current

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_entry(self, id: object) -> Union[CatalogEntryRecord, NotFound]:
        entry = self._repo.get_by_id(id)
        if entry is None:
            return NotFound(RESOURCE, id)
        return CatalogEntryRecord.from_entity(entry)

    def list_entries(self) -> List[CatalogEntryRecord]:
        return [CatalogEntryRecord.from_entity(entry) for entry in self._repo.list()]

    def count_entries(self) -> int:
        return self._repo.count()
