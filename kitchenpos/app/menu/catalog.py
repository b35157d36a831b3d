"""Set menus sold at the counter and online, and the cart-to-draft builder."""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Callable, Dict, List, Mapping

from ..domain import OrderDraft, OrderItem, OrderType, ValidationError
from ..domain.order import items_total


@dataclass(frozen=True)
class MenuItem:
    id: str
    name: str
    description: str
    price: Decimal
    category: str = "Menus"

    def to_json(self) -> dict:
        data = asdict(self)
        data["price"] = float(self.price)
        return data


CATALOG: List[MenuItem] = [
    MenuItem(
        "1",
        "Executive Menu",
        "Main course + salad + drink + dessert",
        Decimal("15.99"),
    ),
    MenuItem(
        "2",
        "Healthy Menu",
        "Large salad + protein + natural drink",
        Decimal("12.99"),
    ),
    MenuItem(
        "3",
        "Vegetarian Menu",
        "Vegetarian main + salad + drink + dessert",
        Decimal("13.99"),
    ),
    MenuItem(
        "4",
        "Menu of the Day",
        "Soup + main course + drink + dessert",
        Decimal("11.99"),
    ),
]

CATALOG_BY_ID: Dict[str, MenuItem] = {item.id: item for item in CATALOG}


def _epoch_millis() -> int:
    return int(time.time() * 1000)


def table_label(millis: Callable[[], int] = _epoch_millis) -> str:
    """Return a dine-in label built from the clock's trailing digits.

    Labels are not unique; two tables seated within the same second of a
    thousand can collide.
    """

    return f"Table {str(millis())[-3:]}"


def build_draft(
    cart: Mapping[str, int],
    customer_name: str = "",
    order_type: OrderType = OrderType.ONLINE,
    millis: Callable[[], int] = _epoch_millis,
) -> OrderDraft:
    """Turn a cart of ``{menu_item_id: quantity}`` into an order draft.

    Lines keep the cart's order and are priced from :data:`CATALOG`. Dine-in
    orders without a customer name get a table label instead.
    """

    items: List[OrderItem] = []
    for item_id, quantity in cart.items():
        menu_item = CATALOG_BY_ID.get(str(item_id))
        if menu_item is None:
            raise ValidationError(f"unknown menu item {item_id!r}", field="cart")
        if quantity <= 0:
            raise ValidationError(
                f"quantity for menu item {item_id!r} must be positive", field="cart"
            )
        items.append(
            OrderItem(name=menu_item.name, quantity=quantity, price=menu_item.price)
        )

    name = customer_name.strip()
    if not name and order_type is OrderType.DINE_IN:
        name = table_label(millis)

    return OrderDraft(
        customer_name=name,
        items=tuple(items),
        total=items_total(items),
        order_type=order_type,
    )
