from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable

from returns.result import Failure, Success

from order_result.core.domain.model.diagnostic import Diagnostic, ErrorCodes
from order_result.core.domain.model.inventory import InventoryRecord
from order_result.core.domain.model.outcome import Outcome
from order_result.core.ports.outbound.inventory import InventoryStore


@dataclass
class InMemoryInventoryStore(InventoryStore):
    """Fake inventory table.

    ``fetch_failures`` / ``update_failures`` map an item id to an error code
    every call for that item reports instead of touching the table.
    """

    records: Dict[int, InventoryRecord] = field(default_factory=dict)
    fetch_failures: Dict[int, str] = field(default_factory=dict)
    update_failures: Dict[int, str] = field(default_factory=dict)

    @classmethod
    def seeded(cls, records: Iterable[InventoryRecord]) -> "InMemoryInventoryStore":
        return cls(records={r.item_id: r for r in records})

    def fetch(self, item_id: int) -> Outcome[InventoryRecord]:
        code = self.fetch_failures.get(item_id)
        if code is not None:
            return Failure(
                Diagnostic(f"Query failed for item {item_id}", code).with_context(
                    "itemId", item_id
                )
            )

        record = self.records.get(item_id)
        if record is None:
            return Failure(
                Diagnostic(
                    f"Item with ID {item_id} not found", ErrorCodes.ENTITY_NOT_FOUND
                ).with_context("itemId", item_id)
            )
        return Success(record)

    def update(
        self, item_id: int, quantity_available: int, quantity_reserved: int
    ) -> Outcome[None]:
        code = self.update_failures.get(item_id)
        if code is not None:
            return Failure(
                Diagnostic(f"Update failed for item {item_id}", code).with_context(
                    "itemId", item_id
                )
            )

        record = self.records.get(item_id)
        if record is None:
            return Failure(
                Diagnostic(
                    f"No rows updated for item {item_id}", ErrorCodes.UPDATE_FAILED
                ).with_context("itemId", item_id)
            )

        # CHECK (0 <= reserved <= available)
        if not 0 <= quantity_reserved <= quantity_available:
            return Failure(
                Diagnostic(
                    f"Constraint violated for item {item_id}", ErrorCodes.DB_ERROR
                )
                .with_context("itemId", item_id)
                .with_context("quantityAvailable", quantity_available)
                .with_context("quantityReserved", quantity_reserved)
            )

        self.records[item_id] = replace(
            record,
            quantity_available=quantity_available,
            quantity_reserved=quantity_reserved,
        )
        return Success(None)
