"""Order store contract and its in-memory implementation."""

from .orders_repo import OrdersRepo
from .orders_repo_memory import InMemoryOrdersRepo, local_now, validate_draft

__all__ = ["InMemoryOrdersRepo", "OrdersRepo", "local_now", "validate_draft"]
