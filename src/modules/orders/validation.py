"""Order validation against the catalog.

``OrderValidator.validate`` runs the checks in a fixed order and stops
at the first failure:

1. Length match: ``len(item_ids) == len(quantities)``.
2. Referential integrity: every id in ``item_ids`` resolves to a catalog
   entry.  Two strategies exist:

   - ``strict``: each distinct id is looked up in the catalog and must
     exist.
   - ``range``: an id fails only when it is greater than the catalog
     row count.  Ids of deleted entries pass this check.

A failed validation is returned as an ``OrderValidationError`` value.
Nothing is written by the validator.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import structlog

from modules.core.results import NotFound

if TYPE_CHECKING:
    from modules.catalog.services import CatalogService
    from modules.orders.dtos import OrderInput

logger = structlog.get_logger(__name__)

LENGTH_MISMATCH_MESSAGE = "Number of items and item quantities in order do not match"
UNKNOWN_ITEM_MESSAGE = "Order contained an item with an invalid ID"


class ValidationErrorKind(enum.Enum):
    LENGTH_MISMATCH = "length_mismatch"
    UNKNOWN_ITEM = "unknown_item"


class ReferenceCheck(str, enum.Enum):
    STRICT = "strict"
    RANGE = "range"


@dataclass(frozen=True)
class OrderValidationError:
    kind: ValidationErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class OrderValidator:
    """Checks an order's structure and catalog references.

    Receives the ``CatalogService`` via constructor injection.
    """

    def __init__(
        self,
        catalog: CatalogService,
        reference_check: ReferenceCheck | str = ReferenceCheck.STRICT,
    ) -> None:
        self._catalog = catalog
        self._reference_check = ReferenceCheck(reference_check)

    @property
    def reference_check(self) -> ReferenceCheck:
        return self._reference_check

    def validate(self, order: OrderInput) -> Optional[OrderValidationError]:
        """Return the first failing check's error, or ``None`` if valid."""
        if len(order.item_ids) != len(order.quantities):
            return self._fail(
                ValidationErrorKind.LENGTH_MISMATCH,
                LENGTH_MISMATCH_MESSAGE,
                item_count=len(order.item_ids),
                quantity_count=len(order.quantities),
            )

        unknown = self._find_unknown_item(order)
        if unknown is not None:
            return self._fail(
                ValidationErrorKind.UNKNOWN_ITEM,
                UNKNOWN_ITEM_MESSAGE,
                item_id=unknown,
                strategy=self._reference_check.value,
            )
        return None

    def _find_unknown_item(self, order: OrderInput) -> Optional[int]:
        if self._reference_check is ReferenceCheck.RANGE:
            count = self._catalog.count_entries()
            return next((id for id in order.item_ids if id > count), None)

        for id in dict.fromkeys(order.item_ids):
            if isinstance(self._catalog.get_entry(id), NotFound):
                return id
        return None

    def _fail(
        self, kind: ValidationErrorKind, message: str, **context
    ) -> OrderValidationError:
        logger.info("order.validation_failed", kind=kind.value, **context)
        return OrderValidationError(kind=kind, message=message)
