from __future__ import annotations

from typing import Protocol

from order_result.core.domain.model.inventory import InventoryRecord
from order_result.core.domain.model.outcome import Outcome


class InventoryStore(Protocol):
    """
    No lock or transaction spans fetch and update. Deployments with several
    concurrent callers must add store-level locking or compare-and-swap.
    """

    def fetch(self, item_id: int) -> Outcome[InventoryRecord]:
        """ENTITY_NOT_FOUND when absent, or an infrastructure code."""
        ...

    def update(
        self, item_id: int, quantity_available: int, quantity_reserved: int
    ) -> Outcome[None]:
        """UPDATE_FAILED when no row was affected."""
        ...
