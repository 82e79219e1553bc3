"""Error Handlers: global exception handlers translating errors into JSON responses.

Invariants:
    - QRDeskError → its http_status with {"message", "error"} body
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details
    - UnhandledErrorMiddleware sits inside CORSMiddleware, so unexpected 500s
      still carry Access-Control-Allow-Origin for allow-listed origins
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from qrdesk.core.errors import ErrorSeverity, InternalError, QRDeskError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(QRDeskError)
    async def qrdesk_error_handler(request: Request, exc: QRDeskError):
        """Handle all QRDesk domain/infrastructure errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.warning
        log(
            f"QRDeskError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all that never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _internal_error_response()


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn exceptions no handler claimed into the generic 500 body."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.error(
                f"Unhandled exception on {request.url.path}",
                exc_info=True,
                extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            )
            return _internal_error_response()


def _internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=InternalError().to_response(),
    )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "message": "Invalid request data",
        "error": "VALIDATION_ERROR",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
