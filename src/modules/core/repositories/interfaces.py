"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that the catalog
and order repository interfaces extend.  Service-layer code depends on
this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the row type managed by the
    repository (e.g. ``CatalogEntry``, ``Order``).  Absent or malformed
    ids are reported as ``None``, never as an exception.
    """

    @abstractmethod
    def get_by_id(self, id: object) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities in store order."""

    @abstractmethod
    def create(self, fields: dict) -> T:
        """Insert a new row and return it with its assigned id."""

    @abstractmethod
    def replace(self, id: int, fields: dict) -> Optional[T]:
        """Overwrite every mutable field of a row in a single UPDATE.

        Returns the refreshed row, or ``None`` if no row matched.
        """

    @abstractmethod
    def delete(self, id: object) -> bool:
        """Permanently remove an entity by ID."""
