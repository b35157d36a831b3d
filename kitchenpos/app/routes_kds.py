"""Kitchen board routes.

The board shows pending and preparing orders oldest first and only offers
the actions the lifecycle table allows for each ticket.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter, Depends

from .deps.store import get_now, get_store, get_urgent_threshold
from .repos import OrdersRepo
from .services import advance, cancel, kitchen_stats, queue_view, urgent_orders
from .services.kds_service import ticket
from .utils.responses import ok

router = APIRouter(prefix="/kds", tags=["kds"])


@router.get("/queue", summary="Active kitchen queue with urgency flags")
def list_queue(
    store: OrdersRepo = Depends(get_store),
    now: datetime = Depends(get_now),
    threshold: int = Depends(get_urgent_threshold),
) -> dict:
    orders = store.all()
    return ok(
        {
            "lanes": queue_view(orders, now, threshold),
            "stats": asdict(kitchen_stats(orders, now, threshold)),
            "urgent": [o.id for o in urgent_orders(orders, now, threshold)],
            "urgent_after_minutes": threshold,
        }
    )


@router.post(
    "/{order_id}/advance",
    summary="Advance an order one step",
    responses={
        404: {"description": "Order not found"},
        409: {"description": "Order is already delivered or cancelled"},
    },
)
def advance_order(
    order_id: str,
    store: OrdersRepo = Depends(get_store),
    now: datetime = Depends(get_now),
    threshold: int = Depends(get_urgent_threshold),
) -> dict:
    return ok(ticket(advance(store, order_id), now, threshold))


@router.post(
    "/{order_id}/cancel",
    summary="Cancel an order",
    responses={
        404: {"description": "Order not found"},
        409: {"description": "Order can no longer be cancelled"},
    },
)
def cancel_order(
    order_id: str,
    store: OrdersRepo = Depends(get_store),
    now: datetime = Depends(get_now),
    threshold: int = Depends(get_urgent_threshold),
) -> dict:
    return ok(ticket(cancel(store, order_id), now, threshold))
