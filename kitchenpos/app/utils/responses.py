from typing import Any, Dict

from fastapi.responses import JSONResponse


def ok(data: Any) -> Dict[str, Any]:
    """Return a success envelope."""
    return {"ok": True, "data": data}


def err(
    code: int | str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Return an error envelope."""
    from ..middlewares.request_id import request_id_ctx

    error: Dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details

    return {"ok": False, "request_id": request_id_ctx.get(None), "error": error}


def error_response(
    status_code: int,
    code: int | str,
    message: str,
    details: Dict[str, Any] | None = None,
) -> JSONResponse:
    """Return ``err`` wrapped in a JSON response."""
    return JSONResponse(err(code, message, details), status_code=status_code)
