"""Menu catalog and cart helpers."""

from fastapi import APIRouter

from ..utils.responses import ok
from .catalog import CATALOG, CATALOG_BY_ID, MenuItem, build_draft, table_label

router = APIRouter()


@router.get("/menu")
def list_menu() -> dict:
    return ok({"items": [item.to_json() for item in CATALOG]})


__all__ = [
    "CATALOG",
    "CATALOG_BY_ID",
    "MenuItem",
    "build_draft",
    "router",
    "table_label",
]
