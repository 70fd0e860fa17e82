"""Service test fixtures — file-backed SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path, schema from Base.metadata
    - db_manager is a real DatabaseSessionManager (NullPool, one connection per session)
    - get_procedure_caller overridden with FakeProcedureCaller (fake_procedure.py),
      and the module singleton set to it so readiness sees an initialized relay
    - client sends the configured Basic credentials; anon_client sends none

Design Decisions:
    - File DB instead of :memory: so separate connections see the same data,
      which is what concurrent-request tests need
    - Lifespan is not run by ASGITransport; fixtures install the singletons instead
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
import app.infrastructure.oracle_procedures as procedures_module
from app.config import get_settings
from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.oracle_procedures import get_procedure_caller
from app.main import app
from app.models import Person  # noqa: F401
from tests.services.fake_procedure import FakeProcedureCaller, VALID_DOCUMENT


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'gateway.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def procedure_caller():
    return FakeProcedureCaller()


@pytest.fixture
def valid_document():
    return dict(VALID_DOCUMENT)


@asynccontextmanager
async def _make_client(manager, caller, auth):
    original_manager = db_module.db_manager
    original_caller = procedures_module.procedure_caller
    db_module.db_manager = manager
    procedures_module.procedure_caller = caller
    app.dependency_overrides[get_procedure_caller] = lambda: caller
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test", auth=auth,
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager
        procedures_module.procedure_caller = original_caller


@pytest.fixture
async def client(db_manager, procedure_caller):
    """Authenticated client over the test database and fake procedure."""
    settings = get_settings()
    async with _make_client(
        db_manager, procedure_caller, (settings.auth_user, settings.auth_pass),
    ) as c:
        yield c


@pytest.fixture
async def anon_client(db_manager, procedure_caller):
    """Client that sends no credentials."""
    async with _make_client(db_manager, procedure_caller, None) as c:
        yield c
