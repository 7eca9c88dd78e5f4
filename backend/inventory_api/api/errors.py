import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inventory_api.core.errors import AppError
from inventory_api.schemas.common import ErrorOut

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path", "header"}


def error_response(status_code: int, message: str, error: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "statusCode": status_code, "error": error},
    )


def _describe(error: dict[str, Any]) -> dict[str, Any]:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS)
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        message = str(ctx["error"])
    else:
        message = error.get("msg", "Invalid value")
    return {"field": field, "message": message, "type": error.get("type")}


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [_describe(item) for item in exc.errors()]
    message = ", ".join(f"{item['field']}: {item['message']}" if item["field"] else item["message"] for item in details)
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message, details)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("HTTP %s on %s %s: %s", exc.status_code, request.method, request.url.path, exc.detail)
    return error_response(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        f"Internal Server Error. {exc}",
        {"type": type(exc).__name__},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorOut, "description": "Invalid input or duplicate name"},
    404: {"model": ErrorOut, "description": "Resource not found"},
    500: {"model": ErrorOut, "description": "Unexpected server error"},
}
