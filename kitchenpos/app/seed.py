"""Demo orders loaded at startup when ``seed_demo_orders`` is enabled."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, List

from .domain import OrderDraft, OrderItem, OrderStatus, OrderType
from .repos import InMemoryOrdersRepo, local_now

logger = logging.getLogger("api.seed")

# (minutes ago, draft, statuses walked after placing)
DEMO_ORDERS = [
    (
        10,
        OrderDraft(
            customer_name="Maria Garcia",
            items=(
                OrderItem(name="Executive Menu", quantity=1, price=Decimal("15.99")),
                OrderItem(name="Healthy Menu", quantity=1, price=Decimal("12.99")),
            ),
            total=Decimal("28.98"),
            order_type=OrderType.ONLINE,
        ),
        [OrderStatus.PREPARING],
    ),
    (
        5,
        OrderDraft(
            customer_name="Carlos Lopez",
            items=(
                OrderItem(name="Menu of the Day", quantity=2, price=Decimal("11.99")),
            ),
            total=Decimal("23.98"),
            order_type=OrderType.DINE_IN,
        ),
        [],
    ),
    (
        20,
        OrderDraft(
            customer_name="Ana Martinez",
            items=(
                OrderItem(name="Vegetarian Menu", quantity=1, price=Decimal("13.99")),
            ),
            total=Decimal("13.99"),
            order_type=OrderType.TAKEAWAY,
        ),
        [OrderStatus.PREPARING, OrderStatus.READY],
    ),
    (
        8,
        OrderDraft(
            customer_name="Table 15",
            items=(
                OrderItem(name="Executive Menu", quantity=2, price=Decimal("15.99")),
            ),
            total=Decimal("31.98"),
            order_type=OrderType.DINE_IN,
        ),
        [],
    ),
]


class BackdatedClock:
    """Hand out preset timestamps once each, then defer to ``fallback``."""

    def __init__(
        self, stamps: List[datetime], fallback: Callable[[], datetime] = local_now
    ) -> None:
        self._stamps = list(stamps)
        self._fallback = fallback

    def __call__(self) -> datetime:
        if self._stamps:
            return self._stamps.pop(0)
        return self._fallback()


def demo_repo(
    now: datetime | None = None,
    fallback: Callable[[], datetime] = local_now,
    **kwargs,
) -> InMemoryOrdersRepo:
    """Return a store pre-filled with the demo orders.

    Orders go through ``place`` and ``set_status`` like any other order, so
    the seeded data obeys the same lifecycle rules.
    """

    now = now or fallback()
    clock = BackdatedClock(
        [now - timedelta(minutes=minutes) for minutes, _, _ in DEMO_ORDERS], fallback
    )
    repo = InMemoryOrdersRepo(clock=clock, **kwargs)
    for _, draft, statuses in DEMO_ORDERS:
        order = repo.place(draft)
        for status in statuses:
            repo.set_status(order.id, status)
    logger.info("seeded %s demo orders", len(DEMO_ORDERS))
    return repo
