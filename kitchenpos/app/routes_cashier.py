"""Cashier panel: today's figures and per-status tab counts."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends

from .deps.store import get_now, get_store
from .repos import OrdersRepo
from .services import daily_stats, status_counts
from .utils.responses import ok

router = APIRouter(prefix="/cashier", tags=["cashier"])


@router.get("/stats", summary="Today's order figures and tab counts")
def cashier_stats(
    store: OrdersRepo = Depends(get_store), now: datetime = Depends(get_now)
) -> dict:
    orders = store.all()
    return ok(
        {
            "today": daily_stats(orders, now).to_json(),
            "counts": status_counts(orders),
        }
    )
