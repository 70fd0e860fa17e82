"""Credential Gate — HTTP Basic check applied to every request before routing.

Invariants:
    - Runs as HTTP middleware, so unknown paths are gated too
    - Single configured pair (AUTH_USER / AUTH_PASS); constant-time comparison
    - Unconfigured credentials reject everything
    - Failure is always 401 + WWW-Authenticate challenge, whatever the route
"""

import logging
import secrets

from fastapi import HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.config import get_settings

logger = logging.getLogger(__name__)

CHALLENGE = 'Basic realm="example"'
_basic = HTTPBasic(auto_error=False)


def credentials_match(
    credentials: HTTPBasicCredentials | None, user: str, password: str,
) -> bool:
    if credentials is None or not user or not password:
        return False
    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), user.encode("utf-8"),
    )
    pass_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), password.encode("utf-8"),
    )
    return user_ok and pass_ok


async def require_basic_auth(request: Request, call_next):
    """HTTP middleware: reject the request unless Basic credentials match."""
    settings = get_settings()
    try:
        credentials = await _basic(request)
    except HTTPException:
        credentials = None
    if not credentials_match(credentials, settings.auth_user, settings.auth_pass):
        logger.info(
            "Rejected unauthenticated request",
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            "Autenticación requerida",
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": CHALLENGE},
        )
    return await call_next(request)
