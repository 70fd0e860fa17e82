"""Health & Readiness Probes — can this instance serve personas and relay requests?

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 unless the personas database answers a probe
      query and the stored-procedure caller has been initialized
    - The readiness body names every failing dependency, never driver detail
    - Both sit behind the same credential gate as every other route
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import app.infrastructure.database as database
import app.infrastructure.oracle_procedures as oracle_procedures
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "personas-gateway"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe — personas database and relay caller."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    relay_ok = oracle_procedures.procedure_caller is not None

    checks = {
        "database": "healthy" if db_ok else "unavailable",
        "relay": "ready" if relay_ok else "not_initialized",
    }
    if not (db_ok and relay_ok):
        reasons = []
        if not db_ok:
            reasons.append("database_unavailable")
        if not relay_ok:
            reasons.append("relay_not_initialized")
        logger.warning(
            f"Readiness failed: {', '.join(reasons)}",
            extra={"procedure": get_settings().relay_procedure},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": reasons[0], "checks": checks},
        )
    return {"status": "ready", "checks": checks}
