"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; storage/infrastructure errors (500) are critical
    - to_response() produces the JSON body the client sees for that error
    - No driver or SQL detail is ever part of to_response()

Design Decisions:
    - Single hierarchy with GatewayError base: one FastAPI handler serves all of them
    - Response bodies keep the Spanish keys of the public API (errores, mensaje,
      error, codigo, detalle); each subclass owns its own shape
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_PROCEDURE = "external_procedure"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Server-side context attached to an error for logging only."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the client-facing JSON body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(GatewayError):
    """Request body or path failed the declared rules."""
    def __init__(self, violations: list[dict], context: ErrorContext | None = None):
        super().__init__(
            f"{len(violations)} validation violation(s)",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errores": self.violations}


class RecordNotFoundError(GatewayError):
    """Requested identity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        client_message: str = "Persona no encontrada",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_id = resource_id
        self.client_message = client_message

    def to_response(self) -> dict:
        return {"mensaje": self.client_message}


class BusinessError(GatewayError):
    """Backend procedure rejected the business content (OUT code != 0)."""
    def __init__(self, codigo: int, mensaje: str, context: ErrorContext | None = None):
        super().__init__(
            mensaje, "BUSINESS_REJECTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.codigo = codigo

    def to_response(self) -> dict:
        return {"mensaje": self.message, "codigo": self.codigo}


# ─── Server Errors (500-level) ──────────────────────────────────

class StorageError(GatewayError):
    """Database operation on the personas table failed."""
    def __init__(
        self, operation: str, client_message: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            client_message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class InfrastructureError(GatewayError):
    """Stored procedure invocation failed at the transport or driver level."""

    CLIENT_MESSAGE = "Error al procesar la transacción"
    CLIENT_DETAIL = "Error interno al invocar el procedimiento"

    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            self.CLIENT_MESSAGE, "PROCEDURE_CALL_FAILED",
            ErrorCategory.EXTERNAL_PROCEDURE, ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"mensaje": self.CLIENT_MESSAGE, "detalle": self.CLIENT_DETAIL}
