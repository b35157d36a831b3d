"""Service layer helpers for the API."""

from .kds_service import advance, available_actions, cancel, queue_view
from .views import (
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

__all__ = [
    "URGENT_WAIT_MINUTES",
    "active_queue",
    "advance",
    "available_actions",
    "cancel",
    "daily_stats",
    "filter_by_status",
    "is_urgent",
    "kitchen_stats",
    "queue_view",
    "status_counts",
    "urgent_orders",
    "wait_minutes",
]
