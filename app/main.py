"""Personas Gateway — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every request passes the Basic credential gate before routing
    - Request context (id, method, path) is bound outermost, so 401s are logged with it too
    - Global error handlers map GatewayError → structured JSON responses
    - Database and procedure caller initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleanup (engine dispose) lives next to setup
    - Error handlers extracted to api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.basic_auth import require_basic_auth
from app.api.error_handlers import register_error_handlers
from app.api.routes import health, personas, transaccion
from app.config import get_settings
from app.infrastructure.database import init_db
from app.infrastructure.observability import log_request_context, setup_logging
from app.infrastructure.oracle_procedures import init_procedure_caller

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.auth_user or not settings.auth_pass:
        logger.warning("AUTH_USER/AUTH_PASS not configured; every request will get 401")
    manager = init_db(settings.sqlalchemy_url, settings.sqlalchemy_connect_args())
    init_procedure_caller(settings.oracle_connect_args())
    logger.info(f"Personas gateway started on port {settings.port}")
    yield
    await manager.dispose()
    logger.info("Personas gateway shutting down")


app = FastAPI(
    title="Personas Gateway",
    description="CRUD de personas y relay de transacciones hacia Oracle.",
    version="1.0.0",
    lifespan=lifespan,
)

app.middleware("http")(require_basic_auth)
app.middleware("http")(log_request_context)

app.include_router(health.router)
app.include_router(personas.router)
app.include_router(transaccion.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
