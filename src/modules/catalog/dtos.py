"""Catalog DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``): an
update never mutates a record, it produces a new one.

- ``CatalogEntryInput``: fields supplied on create and on full replace.
- ``CatalogEntryRecord``: a stored entry, including its identifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.catalog.models import CatalogEntry


class CatalogEntryInput(BaseModel):
    """Immutable DTO for catalog create / replace requests.

    Validates that ``item_name`` and ``brand`` are non-blank.
    ``star_rating`` is expected to be 1-5 but is not enforced.
    """

    model_config = ConfigDict(frozen=True)

    item_name: str
    brand: str
    star_rating: Optional[int] = None
    price: Optional[int] = None
    quantity: Optional[int] = None

    @field_validator("item_name", "brand")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank.")
        return v.strip()


class CatalogEntryRecord(CatalogEntryInput):
    """Immutable view of a stored catalog entry."""

    id: int

    @classmethod
    def from_entity(cls, entry: CatalogEntry) -> CatalogEntryRecord:
        """Build a record from a CatalogEntry model instance."""
        return cls(
            id=entry.id,
            item_name=entry.item_name,
            brand=entry.brand,
            star_rating=entry.star_rating,
            price=entry.price,
            quantity=entry.quantity,
        )

    def replaced_with(self, fields: CatalogEntryInput) -> CatalogEntryRecord:
        """Return a new record carrying this id and every field of ``fields``."""
        return CatalogEntryRecord(id=self.id, **fields.model_dump())
