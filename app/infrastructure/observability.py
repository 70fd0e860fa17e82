"""Gateway Logging — request-correlated JSON logs for the personas and relay paths.

Invariants:
    - Every record carries request_id, method and path while a request is in
      flight ("-" outside one), so repository, relay and credential-gate logs
      of the same request can be joined
    - Domain extras (operation, procedure, codigo, error_code) are surfaced when set
    - Credential-looking extras (password, token) are never written
    - JSON lines when LOG_FORMAT=json, one readable line otherwise

Design Decisions:
    - Request context lives in a ContextVar set by log_request_context
      middleware; a handler-level Filter copies it onto each record
    - Incoming X-Request-ID is reused so an upstream proxy's id survives
"""

import json
import logging
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"

_CONTEXT_FIELDS = ("request_id", "method", "path")
_DOMAIN_FIELDS = ("operation", "procedure", "codigo", "error_code")
_REDACTED_FIELDS = ("password", "token", "auth_pass", "relay_token")

_request_context: ContextVar[dict | None] = ContextVar("request_context", default=None)


class RequestContextFilter(logging.Filter):
    """Stamp the current request's id, method and path on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get() or {}
        for key in _CONTEXT_FIELDS:
            if getattr(record, key, None) is None:
                setattr(record, key, context.get(key, "-"))
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record: base fields, request context, domain extras."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in (*_CONTEXT_FIELDS, *_DOMAIN_FIELDS):
            val = record.__dict__.get(key)
            if val is not None and val != "-":
                log[key] = val
        for key in _REDACTED_FIELDS:
            if key in record.__dict__:
                log[key] = "***"
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


async def log_request_context(request: Request, call_next):
    """HTTP middleware: bind request id/method/path for the request's log records."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:16]
    token = _request_context.set({
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
    })
    try:
        response = await call_next(request)
    finally:
        _request_context.reset(token)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging once at startup."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestContextFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s %(method)s %(path)s]: %(message)s",
        ))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
