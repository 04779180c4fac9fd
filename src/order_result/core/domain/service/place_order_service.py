from __future__ import annotations

from dataclasses import dataclass

from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, Success

from order_result.core.domain.model.diagnostic import ErrorCodes
from order_result.core.domain.model.order import Order, OrderIdSequence
from order_result.core.domain.model.outcome import Outcome
from order_result.core.domain.service.validation import validate_command
from order_result.core.ports.inbound.place_order import (
    PlaceOrderCommand,
    PlaceOrderUseCase,
)
from order_result.core.ports.inbound.reserve_items import ReserveItemsUseCase


@dataclass(frozen=True)
class PlaceOrderDeps:
    reservations: ReserveItemsUseCase
    order_ids: OrderIdSequence


@dataclass(frozen=True)
class PlaceOrderService(PlaceOrderUseCase):
    deps: PlaceOrderDeps

    def place_order(self, command: PlaceOrderCommand) -> Outcome[Order]:
        return flow(
            command,
            validate_command,
            bind(self._open_order),
            bind(self._reserve),
        )

    def _open_order(self, cmd: PlaceOrderCommand) -> Outcome[Order]:
        return Success(
            Order(
                order_id=self.deps.order_ids.next_id(),
                customer_id=cmd.customer_id,
                items=tuple(cmd.items),
            )
        )

    def _reserve(self, order: Order) -> Outcome[Order]:
        reserved = self.deps.reservations.reserve_items(order.items)
        if isinstance(reserved, Success):
            return Success(order.confirm())

        failed = order.fail()
        return Failure(
            reserved.failure()
            .with_context("orderId", failed.order_id)
            .with_context("customerId", failed.customer_id)
            .wrap(f"Order {failed.order_id} failed", ErrorCodes.ORDER_FAILED)
            .with_context("orderId", failed.order_id)
            .with_context("customerId", failed.customer_id)
            .with_context("orderStatus", failed.status.value)
        )
