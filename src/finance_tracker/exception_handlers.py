"""Render every error as the {success: false, message, errors?} envelope."""
import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from finance_tracker.core.exceptions import FinanceTrackerError

logger = logging.getLogger(__name__)

_LOCATIONS = ("body", "query", "path", "header", "cookie")


def error_response(
    status_code: int,
    message: str,
    errors: list[str] | None = None,
    error: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def format_location(loc: Sequence[Any]) -> str:
    """("body", "expenses", 0, "expenseTypeId") -> "expenses[0].expenseTypeId"."""
    parts = list(loc[1:]) if loc and loc[0] in _LOCATIONS else list(loc)
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or (str(loc[0]) if loc else "request")


async def handle_domain_error(request: Request, exc: FinanceTrackerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, exc.errors)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [f"{format_location(err['loc'])}: {err['msg']}" for err in exc.errors()]
    return error_response(400, "Validation error", errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    settings = request.app.state.container.settings()
    return error_response(
        500,
        "Something went wrong!",
        error=str(exc) if settings.is_development else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FinanceTrackerError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
