"""Read-only projections over a snapshot of orders.

Both the cashier panel and the kitchen board render from these helpers.
None of them mutate the orders they receive, and all of them return empty
results or zero for an empty snapshot.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Sequence

from ..domain import ACTIVE_STATUSES, Order, OrderStatus

URGENT_WAIT_MINUTES = 15


@dataclass(frozen=True)
class DailyStats:
    count: int
    pending: int
    preparing: int
    in_progress: int
    delivered: int
    revenue: Decimal

    def to_json(self) -> dict:
        data = asdict(self)
        data["revenue"] = float(self.revenue)
        return data


@dataclass(frozen=True)
class KitchenStats:
    pending: int
    preparing: int
    urgent: int
    active: int


def filter_by_status(
    orders: Iterable[Order], status: OrderStatus | None = None
) -> list[Order]:
    """Return ``orders`` matching ``status``; all of them if ``status`` is None."""

    if status is None:
        return list(orders)
    return [order for order in orders if order.status == status]


def status_counts(orders: Sequence[Order]) -> dict[str, int]:
    """Count orders per status, including statuses with no orders."""

    counts = {status.value: 0 for status in OrderStatus}
    for order in orders:
        counts[order.status.value] += 1
    counts["all"] = len(orders)
    return counts


def _same_local_day(ts: datetime, now: datetime) -> bool:
    if ts.tzinfo is not None and now.tzinfo is not None:
        ts = ts.astimezone(now.tzinfo)
    return ts.date() == now.date()


def daily_stats(orders: Iterable[Order], now: datetime) -> DailyStats:
    """Summarize orders placed on the same calendar day as ``now``.

    Orders from other days are ignored entirely. Revenue only counts
    delivered orders.
    """

    today = [order for order in orders if _same_local_day(order.timestamp, now)]
    pending = sum(1 for o in today if o.status is OrderStatus.PENDING)
    preparing = sum(1 for o in today if o.status is OrderStatus.PREPARING)
    delivered = [o for o in today if o.status is OrderStatus.DELIVERED]
    return DailyStats(
        count=len(today),
        pending=pending,
        preparing=preparing,
        in_progress=pending + preparing,
        delivered=len(delivered),
        revenue=sum((o.total for o in delivered), Decimal("0")),
    )


def active_queue(orders: Iterable[Order]) -> list[Order]:
    """Return pending and preparing orders, oldest first."""

    active = [order for order in orders if order.status in ACTIVE_STATUSES]
    return sorted(active, key=lambda order: order.timestamp)


def wait_minutes(order: Order, now: datetime) -> int:
    """Return whole minutes elapsed since ``order`` was placed."""

    return math.floor((now - order.timestamp).total_seconds() / 60)


def is_urgent(
    order: Order, now: datetime, threshold: int = URGENT_WAIT_MINUTES
) -> bool:
    """Return ``True`` if an active order has waited past ``threshold``."""

    return order.status in ACTIVE_STATUSES and wait_minutes(order, now) > threshold


def urgent_orders(
    orders: Iterable[Order], now: datetime, threshold: int = URGENT_WAIT_MINUTES
) -> list[Order]:
    return [o for o in active_queue(orders) if is_urgent(o, now, threshold)]


def kitchen_stats(
    orders: Sequence[Order], now: datetime, threshold: int = URGENT_WAIT_MINUTES
) -> KitchenStats:
    """Return the counters shown in the kitchen board header."""

    queue = active_queue(orders)
    return KitchenStats(
        pending=sum(1 for o in queue if o.status is OrderStatus.PENDING),
        preparing=sum(1 for o in queue if o.status is OrderStatus.PREPARING),
        urgent=sum(1 for o in queue if is_urgent(o, now, threshold)),
        active=len(queue),
    )
