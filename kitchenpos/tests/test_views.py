from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from kitchenpos.app.domain import Order, OrderItem, OrderStatus, OrderType
from kitchenpos.app.services import (
    URGENT_WAIT_MINUTES,
    active_queue,
    daily_stats,
    filter_by_status,
    is_urgent,
    kitchen_stats,
    status_counts,
    urgent_orders,
    wait_minutes,
)

from .conftest import NOW


def _order(
    order_id: str,
    status: OrderStatus = OrderStatus.PENDING,
    minutes_ago: float = 0,
    total: str = "10.00",
    timestamp: datetime | None = None,
) -> Order:
    return Order(
        id=order_id,
        customer_name="Guest",
        items=(OrderItem(name="Menu of the Day", quantity=1, price=Decimal(total)),),
        total=Decimal(total),
        status=status,
        timestamp=timestamp or NOW - timedelta(minutes=minutes_ago),
        order_type=OrderType.TAKEAWAY,
    )


def test_filter_by_status_without_status_returns_everything():
    orders = [_order("001"), _order("002", OrderStatus.READY)]
    assert filter_by_status(orders) == orders


def test_filter_by_status_keeps_relative_order():
    orders = [
        _order("003", OrderStatus.READY),
        _order("002"),
        _order("001", OrderStatus.READY),
    ]
    assert [o.id for o in filter_by_status(orders, OrderStatus.READY)] == [
        "003",
        "001",
    ]


def test_status_counts_include_empty_statuses():
    counts = status_counts([_order("001"), _order("002", OrderStatus.DELIVERED)])
    assert counts == {
        "pending": 1,
        "preparing": 0,
        "ready": 0,
        "delivered": 1,
        "cancelled": 0,
        "all": 2,
    }


def test_daily_stats_only_counts_today():
    orders = [
        _order("001", OrderStatus.DELIVERED, total="15.99"),
        _order("002", OrderStatus.PENDING, timestamp=NOW - timedelta(days=1)),
    ]
    stats = daily_stats(orders, NOW)
    assert stats.count == 1
    assert stats.revenue == Decimal("15.99")
    assert stats.delivered == 1
    assert stats.in_progress == 0


def test_daily_stats_json_has_numeric_revenue():
    stats = daily_stats([_order("001", OrderStatus.DELIVERED, total="15.99")], NOW)
    data = stats.to_json()
    assert data["revenue"] == 15.99
    assert isinstance(data["revenue"], float)
    assert data["count"] == 1


def test_daily_stats_uses_calendar_day_not_rolling_window():
    just_after_midnight = NOW.replace(hour=0, minute=5)
    late_yesterday = just_after_midnight - timedelta(minutes=10)
    orders = [_order("001", timestamp=late_yesterday)]
    assert daily_stats(orders, just_after_midnight).count == 0


def test_daily_stats_compares_in_the_zone_of_now():
    # 23:30 UTC is already the next day at UTC+2
    ts = datetime(2026, 10, 18, 23, 30, tzinfo=timezone.utc)
    stats = daily_stats([_order("001", timestamp=ts)], NOW)
    assert stats.count == 1


def test_daily_stats_revenue_ignores_undelivered_orders():
    orders = [
        _order("001", OrderStatus.DELIVERED, total="10.50"),
        _order("002", OrderStatus.DELIVERED, total="4.50"),
        _order("003", OrderStatus.READY, total="100.00"),
        _order("004", OrderStatus.CANCELLED, total="100.00"),
        _order("005", OrderStatus.PREPARING),
        _order("006", OrderStatus.PENDING),
    ]
    stats = daily_stats(orders, NOW)
    assert stats.count == 6
    assert stats.revenue == Decimal("15.00")
    assert stats.pending == 1
    assert stats.preparing == 1
    assert stats.in_progress == 2


def test_empty_inputs():
    assert filter_by_status([]) == []
    assert active_queue([]) == []
    assert urgent_orders([], NOW) == []
    stats = daily_stats([], NOW)
    assert stats.count == 0
    assert stats.revenue == Decimal("0")
    assert kitchen_stats([], NOW).active == 0


def test_active_queue_sorts_by_timestamp_not_insertion():
    newer = _order("001", minutes_ago=2)
    older = _order("002", OrderStatus.PREPARING, minutes_ago=9)
    done = _order("003", OrderStatus.READY, minutes_ago=30)
    assert [o.id for o in active_queue([newer, done, older])] == ["002", "001"]


@pytest.mark.parametrize(
    "delta,expected",
    [
        (timedelta(seconds=59), 0),
        (timedelta(minutes=1), 1),
        (timedelta(minutes=15, seconds=59), 15),
        (timedelta(minutes=16), 16),
    ],
)
def test_wait_minutes_floors(delta, expected):
    order = _order("001", timestamp=NOW - delta)
    assert wait_minutes(order, NOW) == expected


def test_is_urgent_boundary():
    assert URGENT_WAIT_MINUTES == 15
    assert is_urgent(_order("001", minutes_ago=16), NOW)
    assert not is_urgent(_order("001", minutes_ago=15), NOW)


def test_finished_orders_are_never_urgent():
    assert not is_urgent(_order("001", OrderStatus.READY, minutes_ago=60), NOW)
    assert not is_urgent(_order("001", OrderStatus.CANCELLED, minutes_ago=60), NOW)


def test_threshold_is_tunable():
    order = _order("001", minutes_ago=6)
    assert is_urgent(order, NOW, threshold=5)
    assert not is_urgent(order, NOW, threshold=6)


def test_kitchen_stats_and_urgent_orders():
    orders = [
        _order("001", minutes_ago=20),
        _order("002", OrderStatus.PREPARING, minutes_ago=30),
        _order("003", minutes_ago=1),
        _order("004", OrderStatus.READY, minutes_ago=40),
    ]
    stats = kitchen_stats(orders, NOW)
    assert (stats.pending, stats.preparing, stats.urgent, stats.active) == (2, 1, 2, 3)
    assert [o.id for o in urgent_orders(orders, NOW)] == ["002", "001"]


def test_projections_do_not_mutate_input():
    orders = [_order("002", minutes_ago=1), _order("001", minutes_ago=5)]
    snapshot = list(orders)
    active_queue(orders)
    daily_stats(orders, NOW)
    kitchen_stats(orders, NOW)
    assert orders == snapshot
