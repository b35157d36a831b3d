"""Map order errors onto HTTP error envelopes."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .domain import IllegalTransitionError, NotFoundError, OrderError, ValidationError
from .utils.responses import error_response

logger = logging.getLogger("api")

STATUS_BY_ERROR: dict[type[OrderError], int] = {
    ValidationError: 422,
    NotFoundError: 404,
    IllegalTransitionError: 409,
}


async def order_error_handler(request: Request, exc: OrderError):
    status_code = STATUS_BY_ERROR.get(type(exc), 400)
    logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
    return error_response(status_code, exc.code, exc.message, exc.details())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    logger.warning("%s %s: %s", request.method, request.url.path, exc.detail)
    return error_response(exc.status_code, exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderError, order_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
