"""Order entity, its line items and the draft accepted at the counter."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    model_validator,
)

from .order_status import OrderStatus

# Largest accepted gap between a declared total and the sum of its lines
TOTAL_TOLERANCE = Decimal("0.01")


class OrderType(str, Enum):
    """Where the order was taken. Display and filtering only."""

    DINE_IN = "dine-in"
    ONLINE = "online"
    TAKEAWAY = "takeaway"


class OrderItem(BaseModel):
    """A single line on an order."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, examples=["Executive Menu"])
    quantity: int = Field(..., gt=0, examples=[1])
    price: Decimal = Field(..., ge=0, examples=[15.99])

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    @field_serializer("price", when_used="json")
    def _price_json(self, value: Decimal) -> float:
        return float(value)


def items_total(items: tuple[OrderItem, ...] | list[OrderItem]) -> Decimal:
    """Return the sum of ``quantity * price`` over ``items``."""

    return sum((item.line_total for item in items), Decimal("0"))


class OrderDraft(BaseModel):
    """Order payload before identity, status and timestamp are assigned.

    Field types are checked on construction. Business rules (non-empty items,
    matching total) are enforced by the store when the draft is placed.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    customer_name: str = Field(..., examples=["Maria Garcia"])
    items: tuple[OrderItem, ...] = ()
    total: Decimal = Field(..., examples=[28.98])
    order_type: OrderType = Field(OrderType.ONLINE, examples=["online"])

    @property
    def computed_total(self) -> Decimal:
        return items_total(self.items)


class Order(BaseModel):
    """A placed order.

    Instances are immutable; a status change replaces the stored record with
    a copy that differs only in ``status``. Construction rejects an empty
    item list and a total that misses the item sum by more than the
    ``tolerance`` passed in the validation context.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    customer_name: str
    items: tuple[OrderItem, ...]
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    timestamp: datetime
    order_type: OrderType

    @model_validator(mode="after")
    def _check_total(self, info: ValidationInfo) -> "Order":
        if not self.items:
            raise ValueError("order must contain at least one item")
        tolerance = (info.context or {}).get("tolerance", TOTAL_TOLERANCE)
        if abs(items_total(self.items) - self.total) > tolerance:
            raise ValueError("total does not match the sum of the items")
        return self

    @field_serializer("total", when_used="json")
    def _total_json(self, value: Decimal) -> float:
        return float(value)

    def with_status(self, status: OrderStatus) -> "Order":
        return self.model_copy(update={"status": status})
