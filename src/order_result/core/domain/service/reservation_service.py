from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from returns.result import Failure, Success

from order_result.core.domain.model.diagnostic import Diagnostic, ErrorCodes
from order_result.core.domain.model.inventory import InventoryRecord, ReservationRequest
from order_result.core.domain.model.outcome import Outcome, enrich, is_success
from order_result.core.domain.service.validation import validate_requests
from order_result.core.ports.inbound.reserve_items import ReserveItemsUseCase
from order_result.core.ports.outbound.inventory import InventoryStore


@dataclass(frozen=True)
class ReservationDeps:
    store: InventoryStore


@dataclass(frozen=True)
class ReservationService(ReserveItemsUseCase):
    """All-or-nothing reservation of several items against one store.

    Requests are processed strictly in input order. When one fails, every
    reservation already committed by this call is released again before the
    failure is returned, so callers never see a half-reserved state.

    Release is best effort: a failed release does not replace the original
    failure. The affected item ids are listed under ``rollbackFailedItemIds``
    on the returned diagnostic and nothing else is done about them.
    """

    deps: ReservationDeps

    def reserve_items(
        self, requests: Sequence[ReservationRequest]
    ) -> Outcome[Tuple[int, ...]]:
        checked = validate_requests(requests)
        if isinstance(checked, Failure):
            return checked

        committed: List[ReservationRequest] = []
        for request in requests:
            result = self._reserve_one(request)
            if isinstance(result, Failure):
                diag = (
                    result.failure()
                    .with_context("attemptedItems", len(requests))
                    .with_context("successfullyReserved", len(committed))
                    .with_context("failedItemId", request.item_id)
                )
                not_released = self._roll_back(committed)
                if not_released:
                    diag.with_context("rollbackFailedItemIds", not_released)
                return Failure(diag)
            committed.append(request)

        return Success(tuple(r.item_id for r in committed))

    def release_reservation(self, item_id: int, quantity: int) -> Outcome[None]:
        return self.deps.store.fetch(item_id).bind(
            lambda record: self.deps.store.update(
                item_id,
                record.quantity_available,
                max(0, record.quantity_reserved - quantity),
            )
        )

    # ---- steps ---------------------------------------------------------------

    def _reserve_one(self, request: ReservationRequest) -> Outcome[None]:
        if request.quantity == 0:
            return Success(None)

        return (
            self._fetch(request.item_id)
            .bind(lambda record: _check_availability(record, request))
            .bind(lambda record: self._commit(record, request))
        )

    def _fetch(self, item_id: int) -> Outcome[InventoryRecord]:
        fetched = self.deps.store.fetch(item_id)
        if isinstance(fetched, Success):
            return fetched

        lower = fetched.failure()
        if lower.code == ErrorCodes.ENTITY_NOT_FOUND:
            return Failure(
                Diagnostic(
                    f"Item {item_id} does not exist", ErrorCodes.ITEM_NOT_FOUND
                ).with_context("itemId", item_id)
            )
        return Failure(
            lower.wrap(
                f"Failed to check inventory for item {item_id}",
                ErrorCodes.RESERVATION_FAILED,
            ).with_context("itemId", item_id)
        )

    def _commit(
        self, record: InventoryRecord, request: ReservationRequest
    ) -> Outcome[None]:
        updated = self.deps.store.update(
            record.item_id,
            record.quantity_available,
            record.quantity_reserved + request.quantity,
        )
        return enrich(updated, "itemId", record.item_id)

    def _roll_back(self, committed: Sequence[ReservationRequest]) -> Tuple[int, ...]:
        failed: List[int] = []
        for request in reversed(committed):
            if request.quantity == 0:
                continue
            released = self.release_reservation(request.item_id, request.quantity)
            if not is_success(released):
                failed.append(request.item_id)
        return tuple(failed)


def _check_availability(
    record: InventoryRecord, request: ReservationRequest
) -> Outcome[InventoryRecord]:
    available = record.unreserved
    if available < request.quantity:
        return Failure(
            Diagnostic(
                f"Insufficient inventory for item {request.item_id}",
                ErrorCodes.INSUFFICIENT_INVENTORY,
            )
            .with_context("itemId", request.item_id)
            .with_context("requestedQuantity", request.quantity)
            .with_context("availableQuantity", available)
        )
    return Success(record)
