from decimal import Decimal

import pytest

from kitchenpos.app.domain import OrderStatus, OrderType, ValidationError
from kitchenpos.app.menu import CATALOG, build_draft, table_label


def test_catalog_has_the_four_set_menus():
    assert [item.price for item in CATALOG] == [
        Decimal("15.99"),
        Decimal("12.99"),
        Decimal("13.99"),
        Decimal("11.99"),
    ]


def test_build_draft_prices_lines_from_catalog():
    draft = build_draft({"1": 1, "4": 2}, "Carlos Lopez")
    assert [(i.name, i.quantity) for i in draft.items] == [
        ("Executive Menu", 1),
        ("Menu of the Day", 2),
    ]
    assert draft.total == Decimal("39.97")
    assert draft.order_type is OrderType.ONLINE


def test_build_draft_unknown_item():
    with pytest.raises(ValidationError):
        build_draft({"99": 1}, "Ana")


def test_build_draft_rejects_non_positive_quantity():
    with pytest.raises(ValidationError):
        build_draft({"1": 0}, "Ana")


def test_dine_in_without_name_gets_table_label():
    draft = build_draft({"2": 1}, "", OrderType.DINE_IN, millis=lambda: 1760871234567)
    assert draft.customer_name == "Table 567"


def test_takeaway_keeps_blank_name_for_store_to_reject(store):
    draft = build_draft({"2": 1}, "  ", OrderType.TAKEAWAY)
    assert draft.customer_name == ""
    with pytest.raises(ValidationError):
        store.place(draft)


def test_empty_cart_is_rejected_by_store(store):
    with pytest.raises(ValidationError):
        store.place(build_draft({}, "Ana"))


def test_cart_draft_places_cleanly(store):
    order = store.place(build_draft({"3": 1}, "Ana Martinez", OrderType.TAKEAWAY))
    assert order.status is OrderStatus.PENDING
    assert order.total == Decimal("13.99")


def test_table_label_uses_last_three_digits():
    assert table_label(lambda: 1000) == "Table 000"


def test_menu_item_json_has_numeric_price():
    data = CATALOG[0].to_json()
    assert data == {
        "id": "1",
        "name": "Executive Menu",
        "description": "Main course + salad + drink + dessert",
        "price": 15.99,
        "category": "Menus",
    }


def test_dine_in_with_name_keeps_the_name():
    draft = build_draft({"1": 1}, "Carlos Lopez", OrderType.DINE_IN, millis=lambda: 123)
    assert draft.customer_name == "Carlos Lopez"
