"""Order placement and status routes used by every surface."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from .deps.store import get_store
from .domain import OrderDraft, OrderStatus, OrderType
from .menu import build_draft
from .repos import OrdersRepo
from .services import available_actions, filter_by_status
from .utils.responses import ok

router = APIRouter(prefix="/orders", tags=["orders"])


class StatusChangeIn(BaseModel):
    status: OrderStatus = Field(..., examples=["preparing"])


class CartIn(BaseModel):
    cart: Dict[str, int] = Field(..., examples=[{"1": 2, "4": 1}])
    customer_name: str = Field("", examples=["Maria Garcia"])
    order_type: OrderType = Field(OrderType.ONLINE, examples=["dine-in"])


def _order_out(order) -> dict:
    data = order.model_dump(mode="json")
    data["actions"] = available_actions(order)
    return data


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Place an order",
    responses={
        201: {"description": "Order placed as pending"},
        422: {"description": "Empty items, blank name or total mismatch"},
    },
)
def place_order(draft: OrderDraft, store: OrdersRepo = Depends(get_store)) -> dict:
    order = store.place(draft)
    return ok(_order_out(order))


@router.post(
    "/from-cart",
    status_code=status.HTTP_201_CREATED,
    summary="Place an order from a menu cart",
    responses={
        201: {"description": "Order placed as pending"},
        422: {"description": "Unknown menu item or invalid cart"},
    },
)
def place_cart_order(payload: CartIn, store: OrdersRepo = Depends(get_store)) -> dict:
    draft = build_draft(payload.cart, payload.customer_name, payload.order_type)
    order = store.place(draft)
    return ok(_order_out(order))


@router.get("", summary="List orders, newest first")
def list_orders(
    status: Optional[OrderStatus] = None, store: OrdersRepo = Depends(get_store)
) -> dict:
    orders = filter_by_status(store.all(), status)
    return ok({"orders": [_order_out(o) for o in orders]})


@router.get(
    "/{order_id}",
    summary="Get an order",
    responses={404: {"description": "Order not found"}},
)
def read_order(order_id: str, store: OrdersRepo = Depends(get_store)) -> dict:
    return ok(_order_out(store.get(order_id)))


@router.post(
    "/{order_id}/status",
    summary="Move an order to a new status",
    responses={
        404: {"description": "Order not found"},
        409: {"description": "Transition not allowed from the current status"},
    },
)
def change_status(
    order_id: str, payload: StatusChangeIn, store: OrdersRepo = Depends(get_store)
) -> dict:
    order = store.set_status(order_id, payload.status)
    return ok(_order_out(order))
