from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pydantic import BaseModel

from order_result.core.domain.model.diagnostic import (
    INFRASTRUCTURE_CODES,
    Diagnostic,
    ErrorCodes,
)
from order_result.core.domain.model.inventory import ReservationRequest
from order_result.core.domain.model.order import Order
from order_result.core.domain.model.outcome import match_outcome
from order_result.core.ports.inbound.place_order import (
    PlaceOrderCommand,
    PlaceOrderUseCase,
)

logger = logging.getLogger("order_result.controller")


# ---- response DTOs -----------------------------------------------------------


class OrderItemOut(BaseModel):
    item_id: int
    quantity: int


class OrderOut(BaseModel):
    order_id: int
    customer_id: str
    status: str
    items: list[OrderItemOut]


class ApiResponse(BaseModel):
    success: bool
    data: OrderOut | None = None
    message: str = ""
    error_code: str | None = None


# ---- boundary ----------------------------------------------------------------


@dataclass(frozen=True)
class OrderController:
    """Outermost caller. The only place a diagnostic gets logged."""

    place_order_uc: PlaceOrderUseCase

    def handle_place_order(
        self, customer_id: str, items: Sequence[ReservationRequest]
    ) -> ApiResponse:
        outcome = self.place_order_uc.place_order(
            PlaceOrderCommand(customer_id=customer_id, items=tuple(items))
        )
        return match_outcome(outcome, self._on_success, self._on_failure)

    def _on_success(self, order: Order) -> ApiResponse:
        logger.info("Order %s placed for %s", order.order_id, order.customer_id)
        return ApiResponse(
            success=True,
            data=_to_out(order),
            message="Order placed successfully",
        )

    def _on_failure(self, diag: Diagnostic) -> ApiResponse:
        logger.error("Order placement failed: %s", diag)
        return ApiResponse(
            success=False,
            message=user_message(diag),
            error_code=diag.code,
        )


def _to_out(order: Order) -> OrderOut:
    return OrderOut(
        order_id=order.order_id,
        customer_id=order.customer_id,
        status=order.status.value,
        items=[OrderItemOut(item_id=i.item_id, quantity=i.quantity) for i in order.items],
    )


def user_message(diag: Diagnostic) -> str:
    """Translate a diagnostic code into text for the end user."""
    code = diag.code
    ctx = diag.context

    if code == ErrorCodes.INSUFFICIENT_INVENTORY:
        return (
            f"Sorry, not enough stock for item {ctx.get('itemId', 'unknown')}. "
            f"Requested {ctx.get('requestedQuantity', 'unknown')}, "
            f"available {ctx.get('availableQuantity', 'unknown')}."
        )
    if code == ErrorCodes.ITEM_NOT_FOUND:
        return f"Item {ctx.get('itemId', 'unknown')} is not available."
    if code == ErrorCodes.VALIDATION_ERROR:
        return diag.message
    if code == ErrorCodes.DB_TIMEOUT:
        return "System is experiencing high load. Please try again."
    if code in INFRASTRUCTURE_CODES:
        return "We encountered a problem processing your order. Please try again."
    if code in (ErrorCodes.ORDER_FAILED, ErrorCodes.RESERVATION_FAILED):
        if diag.cause is not None:
            return user_message(diag.cause)
        return "Could not complete order."
    return "Could not complete order. Please try again or contact support."
