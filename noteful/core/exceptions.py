"""
Global exception handlers for consistent API errors.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noteful.services.errors import NotFound, ServiceError, StorageFailure


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("noteful.errors")

    @app.exception_handler(ServiceError)
    async def _service_error_handler(request: Request, exc: ServiceError):
        if isinstance(exc, NotFound):
            # 404 sin cuerpo
            return Response(status_code=exc.status_code)
        if isinstance(exc, StorageFailure):
            log.error("Storage failure request_id=%s: %s", _req_id(request), exc.__cause__ or exc)
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.message))

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


def jsonable_errors(exc: RequestValidationError) -> list:
    # `ctx` puede traer excepciones no serializables
    return jsonable_encoder([{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()])
