# main.py

"""FastAPI application for the counter, online ordering and kitchen board.

All orders live in memory for the lifetime of the process.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import get_settings

from .error_handlers import register_error_handlers
from .menu import router as menu_router
from .middlewares import LoggingMiddleware, RequestIdMiddleware
from .obs import configure_logging
from .repos import InMemoryOrdersRepo
from .routes_cashier import router as cashier_router
from .routes_kds import router as kds_router
from .routes_orders import router as orders_router
from .seed import demo_repo

logger = logging.getLogger("api")


def build_store(settings=None) -> InMemoryOrdersRepo:
    """Create the order store described by ``settings``."""

    settings = settings or get_settings()
    options = {
        "id_width": settings.order_id_width,
        "tolerance": settings.total_tolerance,
    }
    if settings.seed_demo_orders:
        return demo_repo(**options)
    return InMemoryOrdersRepo(**options)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.store = build_store(settings)
    logger.info("order store ready with %s orders", len(app.state.store))
    yield
    logger.info("shutting down; in-memory orders are discarded")


app = FastAPI(title="kitchenpos", lifespan=lifespan)

app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIdMiddleware)
register_error_handlers(app)

app.include_router(orders_router)
app.include_router(cashier_router)
app.include_router(kds_router)
app.include_router(menu_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}
