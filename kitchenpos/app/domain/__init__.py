"""Domain models and helpers."""

from .errors import IllegalTransitionError, NotFoundError, OrderError, ValidationError
from .order import Order, OrderDraft, OrderItem, OrderType
from .order_status import (
    ACTIVE_STATUSES,
    TRANSITIONS,
    OrderStatus,
    can_cancel,
    can_transition,
    is_terminal,
    next_status,
)

__all__ = [
    "ACTIVE_STATUSES",
    "IllegalTransitionError",
    "NotFoundError",
    "Order",
    "OrderDraft",
    "OrderError",
    "OrderItem",
    "OrderStatus",
    "OrderType",
    "TRANSITIONS",
    "ValidationError",
    "can_cancel",
    "can_transition",
    "is_terminal",
    "next_status",
]
