"""Dependency helpers shared by the order routes."""

from datetime import datetime

from fastapi import Request

from config import get_settings

from ..repos import OrdersRepo, local_now


def get_store(request: Request) -> OrdersRepo:
    """Return the order store attached to the running application."""
    return request.app.state.store


def get_now() -> datetime:
    """Return the reference instant used by time-based projections.

    Overridden in tests to pin the clock.
    """
    return local_now()


def get_urgent_threshold() -> int:
    return get_settings().urgent_wait_minutes
