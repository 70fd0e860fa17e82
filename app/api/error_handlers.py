"""Error Handlers — global exception handlers for the gateway API.

Invariants:
    - GatewayError → its own to_response() body and http_status
    - RequestValidationError (path/body parsing) → 400 {errores} in the same
      violation shape as core/validation
    - Exception (catch-all) → 500 generic body, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (GatewayError), validation (FastAPI), catch-all (Exception)
    - Client errors are not logged as server faults; 500s are logged at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import GatewayError, ErrorSeverity
from app.core.validation import violation

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Error interno del servidor"

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.DEBUG,
    ErrorSeverity.WARNING: logging.INFO,
    ErrorSeverity.ERROR: logging.WARNING,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_gateway_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_gateway_error_handler(app: FastAPI) -> None:
    """Register gateway domain/infrastructure error handler."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"GatewayError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_SERVER_ERROR},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Same violation shape as core/validation.violation()."""
    errores = []
    for e in exc.errors():
        loc = list(e["loc"])
        location = str(loc.pop(0)) if loc else "body"
        item = violation(".".join(str(part) for part in loc), e["msg"], location)
        if "input" in e and location == "path":
            item["value"] = e["input"]
        errores.append(item)
    return {"errores": errores}
