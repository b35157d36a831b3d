"""Errors raised by the order core.

All of them are recoverable and are reported back to the calling surface;
none of them leave a partial mutation behind.
"""

from __future__ import annotations

from typing import Any

from .order_status import OrderStatus


class OrderError(Exception):
    """Base class for order lifecycle errors."""

    code = "ORDER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def details(self) -> dict[str, Any] | None:
        return None


class ValidationError(OrderError):
    """Raised when an order draft is malformed."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def details(self) -> dict[str, Any] | None:
        if self.field is None:
            return None
        return {"field": self.field}


class NotFoundError(OrderError):
    """Raised when no order exists for an id."""

    code = "NOT_FOUND"

    def __init__(self, order_id: str) -> None:
        super().__init__(f"order {order_id!r} not found")
        self.order_id = order_id

    def details(self) -> dict[str, Any] | None:
        return {"order_id": self.order_id}


class IllegalTransitionError(OrderError):
    """Raised when a status change is not in the transition table.

    ``dst`` is ``None`` when an advance was requested on a terminal order.
    """

    code = "ILLEGAL_TRANSITION"

    def __init__(self, src: OrderStatus, dst: OrderStatus | None) -> None:
        target = dst.value if dst is not None else "none"
        super().__init__(f"cannot transition from {src.value!r} to {target!r}")
        self.src = src
        self.dst = dst

    def details(self) -> dict[str, Any] | None:
        return {
            "from": self.src.value,
            "to": self.dst.value if self.dst is not None else None,
        }
