"""Test configuration for order core tests."""

import pathlib
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from kitchenpos.app.domain import OrderDraft, OrderItem, OrderStatus, OrderType  # noqa: E402
from kitchenpos.app.repos import InMemoryOrdersRepo  # noqa: E402

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone(timedelta(hours=2)))

# Status path walked from pending to reach each status.
PATHS = {
    OrderStatus.PENDING: [],
    OrderStatus.PREPARING: [OrderStatus.PREPARING],
    OrderStatus.READY: [OrderStatus.PREPARING, OrderStatus.READY],
    OrderStatus.DELIVERED: [
        OrderStatus.PREPARING,
        OrderStatus.READY,
        OrderStatus.DELIVERED,
    ],
    OrderStatus.CANCELLED: [OrderStatus.CANCELLED],
}


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def draft(
    name: str = "A",
    quantity: int = 2,
    price: str = "10.00",
    total: str | None = None,
    customer_name: str = "Maria Garcia",
    order_type: OrderType = OrderType.ONLINE,
) -> OrderDraft:
    items = (OrderItem(name=name, quantity=quantity, price=Decimal(price)),)
    declared = Decimal(total) if total is not None else Decimal(price) * quantity
    return OrderDraft(
        customer_name=customer_name,
        items=items,
        total=declared,
        order_type=order_type,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryOrdersRepo(clock=clock)


@pytest.fixture
def make_order(store, clock):
    """Place an order ``minutes_ago`` and walk it to ``status``."""

    def _make(
        status: OrderStatus = OrderStatus.PENDING,
        minutes_ago: float = 0,
        total: str = "20.00",
        **kwargs,
    ):
        saved = clock.now
        clock.now = NOW - timedelta(minutes=minutes_ago)
        try:
            order = store.place(draft(total=total, price=total, quantity=1, **kwargs))
        finally:
            clock.now = saved
        for step in PATHS[status]:
            order = store.set_status(order.id, step)
        return order

    return _make
