"""
Domain errors and the global exception handlers that turn them into
consistent `{message}` JSON bodies.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base error raised by services; carries its own HTTP status."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, location: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.location = location
        super().__init__(self.message)


class Unauthorized(AppError):
    status_code = 401
    default_message = "Unauthorized"


class InvalidId(AppError):
    status_code = 400
    default_message = "The `id` is not valid"


class NotFound(AppError):
    status_code = 404
    default_message = "Not Found"


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation error"


class TooManyRequests(AppError):
    status_code = 429
    default_message = "Too many attempts, try again later"


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("noteful.errors")

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            log.error("App error request_id=%s: %s", _req_id(request), exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(request, exc.message, location=exc.location),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_body(request, exc.detail or "HTTP error"),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_body(request, "Validation error", errors=jsonable_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        log.exception("Unhandled error request_id=%s", _req_id(request))
        return JSONResponse(status_code=500, content=_body(request, "Internal server error"))


def jsonable_errors(exc: RequestValidationError) -> list[Dict[str, Any]]:
    # `ctx` puede traer la excepción original (no serializable)
    return [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]
