"""Exception handlers translating errors into the JSON response envelope."""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.config import get_settings
from blog_api.errors import AppError, ErrorKind, ValidationFailed

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    errors: list[dict[str, str]] | None = None,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    """Build a failure envelope: {"success": false, "message": ..., "errors"?: [...]}."""
    content: dict[str, Any] = {"success": False, "message": message}
    if errors:
        content["errors"] = errors
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _validation_message(errors: list[dict[str, Any]]) -> str:
    locations = {error["loc"][0] for error in errors if error.get("loc")}
    if locations == {"path"}:
        if any("article_id" in error["loc"] for error in errors):
            return "Invalid article ID"
        return "Invalid path parameter"
    if locations == {"query"}:
        return "Invalid query parameters"
    return "Validation failed"


def _field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    result = []
    for error in errors:
        # Drop the "body"/"query"/"path" prefix from the location
        loc = [str(part) for part in error.get("loc", ())[1:]]
        result.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})
    return result


async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    status_code = exc.status_code
    level = logger.error if status_code >= 500 else logger.warning
    level(f"{request.method} {request.url.path} -> {status_code} {exc.kind.value}: {exc.message}")

    headers = None
    if exc.kind is ErrorKind.UNAUTHENTICATED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(status_code, exc.message, headers=headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    error = ValidationFailed(_validation_message(errors))
    logger.warning(f"{request.method} {request.url.path} -> {error.status_code} {error.message}")
    return error_response(error.status_code, error.message, errors=_field_errors(errors))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Route not found"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")

    extra = {}
    if get_settings().is_development:
        extra["stack"] = "".join(traceback.format_exception(exc))
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", **extra
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all envelope-producing handlers to the app."""
    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
