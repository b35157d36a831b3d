"""Order status enumeration and allowed transitions."""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """Enumerate the lifecycle states for an order."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


TRANSITIONS: dict[OrderStatus, list[OrderStatus]] = {
    OrderStatus.PENDING: [OrderStatus.PREPARING, OrderStatus.CANCELLED],
    OrderStatus.PREPARING: [OrderStatus.READY, OrderStatus.CANCELLED],
    OrderStatus.READY: [OrderStatus.DELIVERED],
    OrderStatus.DELIVERED: [],
    OrderStatus.CANCELLED: [],
}

# Forward edge offered as the single "advance" action on a ticket.
_ADVANCE: dict[OrderStatus, OrderStatus] = {
    OrderStatus.PENDING: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.READY,
    OrderStatus.READY: OrderStatus.DELIVERED,
}

# Orders the kitchen is still working on.
ACTIVE_STATUSES = frozenset({OrderStatus.PENDING, OrderStatus.PREPARING})


def can_transition(src: OrderStatus, dst: OrderStatus) -> bool:
    """Return ``True`` if an order can move from ``src`` to ``dst``."""

    return dst in TRANSITIONS.get(src, [])


def next_status(current: OrderStatus) -> OrderStatus | None:
    """Return the status reached by advancing ``current``.

    ``None`` is returned for terminal states, so callers can offer exactly one
    advance action without knowing the table.
    """

    nxt = _ADVANCE.get(current)
    if nxt is not None and not can_transition(current, nxt):
        return None
    return nxt


def can_cancel(current: OrderStatus) -> bool:
    """Return ``True`` while an order may still be cancelled."""

    return can_transition(current, OrderStatus.CANCELLED)


def is_terminal(current: OrderStatus) -> bool:
    return not TRANSITIONS.get(current)
