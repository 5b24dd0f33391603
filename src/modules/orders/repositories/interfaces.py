"""Order repository interface.

The order store holds no cross-entity logic: catalog references are
checked by ``OrderValidator`` before the service is called.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""
