"""Catalog repository interface.

Extends ``IRepository[CatalogEntry]`` with the row count used by the
range-based order reference check and a bulk insert used for seeding.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.catalog.models import CatalogEntry


class ICatalogRepository(IRepository["CatalogEntry"]):
    """Repository contract for the CatalogEntry aggregate."""

    @abstractmethod
    def count(self) -> int:
        """Total number of stored entries."""

    @abstractmethod
    def bulk_create(self, rows: List[dict]) -> List["CatalogEntry"]:
        """Insert several rows in one transaction, returning them with ids."""
