import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transaction_service.core.config import settings
from transaction_service.exceptions import ServiceError

logger = logging.getLogger(__name__)


def error_body(message: str, error: str = None, **extra) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    body.update(extra)
    return body


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.error))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=error_body("Validation failed", errors=jsonable_encoder(exc.errors())),
    )


async def unhandled_errors(request: Request, call_next):
    """Última barrera: cualquier excepción no controlada termina en 500"""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(f"[TRANSACTIONS] Unhandled error on {request.method} {request.url.path}")
        extra = {"stackTrace": traceback.format_exc()} if settings.debug else {}
        return JSONResponse(
            status_code=500,
            content=error_body("Internal server error", str(exc), **extra),
        )


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.middleware("http")(unhandled_errors)
