"""In-memory implementation of :class:`OrdersRepo`.

State lives only in process memory and is gone after a restart. Mutations are
serialized with a lock so concurrent terminals cannot hand out duplicate ids
or race on a status change.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from decimal import Decimal
from typing import Callable

from ..domain import (
    IllegalTransitionError,
    NotFoundError,
    Order,
    OrderDraft,
    OrderStatus,
    ValidationError,
    can_transition,
)
from .orders_repo import OrdersRepo

logger = logging.getLogger("api.orders")

Clock = Callable[[], datetime]

_STATUS_MESSAGES = {
    OrderStatus.PREPARING: "order %s started in kitchen",
    OrderStatus.READY: "order %s ready for pickup",
    OrderStatus.DELIVERED: "order %s delivered",
    OrderStatus.CANCELLED: "order %s cancelled",
}


def local_now() -> datetime:
    """Return the current time as an aware datetime in the local zone."""
    return datetime.now().astimezone()


def validate_draft(draft: OrderDraft, tolerance: Decimal = Decimal("0.01")) -> None:
    """Raise :class:`ValidationError` if ``draft`` cannot become an order."""

    if not draft.items:
        raise ValidationError("order must contain at least one item", field="items")
    if not draft.customer_name:
        raise ValidationError("customer name is required", field="customer_name")
    computed = draft.computed_total
    if abs(computed - draft.total) > tolerance:
        raise ValidationError(
            f"declared total {draft.total} does not match item total {computed}",
            field="total",
        )


class InMemoryOrdersRepo(OrdersRepo):
    """Order store backed by a dict, newest order first."""

    def __init__(
        self,
        clock: Clock = local_now,
        id_width: int = 3,
        tolerance: Decimal = Decimal("0.01"),
        start_id: int = 1,
    ) -> None:
        self._clock = clock
        self._id_width = id_width
        self._tolerance = tolerance
        self._next_id = start_id
        self._orders: dict[str, Order] = {}
        self._recent: list[str] = []
        self._lock = threading.Lock()

    def place(self, draft: OrderDraft) -> Order:
        validate_draft(draft, self._tolerance)
        with self._lock:
            order_id = str(self._next_id).zfill(self._id_width)
            order = Order.model_validate(
                {
                    "id": order_id,
                    "customer_name": draft.customer_name,
                    "items": draft.items,
                    "total": draft.total,
                    "status": OrderStatus.PENDING,
                    "timestamp": self._clock(),
                    "order_type": draft.order_type,
                },
                context={"tolerance": self._tolerance},
            )
            self._orders[order_id] = order
            self._recent.insert(0, order_id)
            self._next_id += 1
        logger.info(
            "order %s placed for %s (%s items, total %s)",
            order.id,
            order.order_type.value,
            len(order.items),
            order.total,
        )
        return order

    def set_status(self, order_id: str, status: OrderStatus) -> Order:
        status = OrderStatus(status)
        with self._lock:
            current = self._orders.get(order_id)
            if current is None:
                raise NotFoundError(order_id)
            if not can_transition(current.status, status):
                raise IllegalTransitionError(current.status, status)
            updated = current.with_status(status)
            self._orders[order_id] = updated
        logger.info(_STATUS_MESSAGES[status], order_id)
        return updated

    def get(self, order_id: str) -> Order:
        with self._lock:
            order = self._orders.get(order_id)
        if order is None:
            raise NotFoundError(order_id)
        return order

    def all(self) -> tuple[Order, ...]:
        with self._lock:
            return tuple(self._orders[oid] for oid in self._recent)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
