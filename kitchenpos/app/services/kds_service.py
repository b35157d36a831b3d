from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Protocol, Sequence

from ..domain import (
    IllegalTransitionError,
    Order,
    OrderStatus,
    can_cancel,
    is_terminal,
    next_status,
)
from .views import URGENT_WAIT_MINUTES, active_queue, is_urgent, wait_minutes


class OrderStore(Protocol):
    """Minimal interface required to move orders along."""

    def get(self, order_id: str) -> Order:
        """Fetch a single order."""

    def set_status(self, order_id: str, status: OrderStatus) -> Order:
        """Persist a new status for an order."""


def available_actions(order: Order) -> List[Dict[str, str]]:
    """Return the buttons a surface should offer for ``order``.

    Derived only from the lifecycle table: at most one ``advance`` action and
    a ``cancel`` action while the order can still be cancelled.
    """

    actions: List[Dict[str, str]] = []
    nxt = next_status(order.status)
    if nxt is not None:
        actions.append({"action": "advance", "target": nxt.value})
    if can_cancel(order.status):
        actions.append({"action": "cancel", "target": OrderStatus.CANCELLED.value})
    return actions


def advance(store: OrderStore, order_id: str) -> Order:
    """Move an order one step forward along the preparation path."""

    order = store.get(order_id)
    if is_terminal(order.status):
        raise IllegalTransitionError(order.status, None)
    return store.set_status(order_id, next_status(order.status))


def cancel(store: OrderStore, order_id: str) -> Order:
    return store.set_status(order_id, OrderStatus.CANCELLED)


def ticket(
    order: Order, now: datetime, threshold: int = URGENT_WAIT_MINUTES
) -> Dict[str, Any]:
    """Render ``order`` as a kitchen ticket."""

    data = order.model_dump(mode="json")
    data["wait_minutes"] = wait_minutes(order, now)
    data["urgent"] = is_urgent(order, now, threshold)
    data["actions"] = available_actions(order)
    return data


def queue_view(
    orders: Sequence[Order], now: datetime, threshold: int = URGENT_WAIT_MINUTES
) -> Dict[str, List[Dict[str, Any]]]:
    """Return the active queue split into kitchen lanes, oldest first."""

    lanes: Dict[str, List[Dict[str, Any]]] = {
        OrderStatus.PENDING.value: [],
        OrderStatus.PREPARING.value: [],
    }
    for order in active_queue(orders):
        lanes[order.status.value].append(ticket(order, now, threshold))
    return lanes
