from __future__ import annotations

from typing import Sequence

from returns.result import Failure, Success

from order_result.core.domain.model.diagnostic import Diagnostic, ErrorCodes
from order_result.core.domain.model.inventory import ReservationRequest
from order_result.core.domain.model.outcome import Outcome
from order_result.core.ports.inbound.place_order import PlaceOrderCommand


def _invalid(message: str, field: str) -> Diagnostic:
    return Diagnostic(message, ErrorCodes.VALIDATION_ERROR).with_context("field", field)


def validate_requests(
    requests: Sequence[ReservationRequest],
) -> Outcome[Sequence[ReservationRequest]]:
    if not requests:
        return Failure(
            Diagnostic("Cannot reserve empty item list", ErrorCodes.VALIDATION_ERROR)
        )
    for i, req in enumerate(requests):
        if req.item_id <= 0:
            return Failure(
                _invalid(f"items[{i}].item_id must be > 0", "Items").with_context(
                    "index", i
                )
            )
        if req.quantity < 0:
            return Failure(
                _invalid(f"items[{i}].quantity must be >= 0", "Items").with_context(
                    "index", i
                )
            )
    return Success(requests)


def validate_customer_id(cmd: PlaceOrderCommand) -> Outcome[PlaceOrderCommand]:
    if not cmd.customer_id or not cmd.customer_id.strip():
        return Failure(_invalid("Customer ID is required", "CustomerId"))
    return Success(cmd)


def validate_items(cmd: PlaceOrderCommand) -> Outcome[PlaceOrderCommand]:
    if not cmd.items:
        return Failure(_invalid("Order must contain at least one item", "Items"))
    return validate_requests(cmd.items).map(lambda _: cmd)


def validate_command(cmd: PlaceOrderCommand) -> Outcome[PlaceOrderCommand]:
    return Success(cmd).bind(validate_customer_id).bind(validate_items)
