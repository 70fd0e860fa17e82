"""Route Dependencies — builds per-request repository and relay objects.

Invariants:
    - One AsyncSession (one connection) per request, closed by get_db
    - StorageOptions / RelayRouting come from cached settings; never mutated
    - Tests replace get_db and get_procedure_caller via dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.repository_protocols import ProcedureCaller
from app.infrastructure.database import get_db
from app.infrastructure.oracle_procedures import get_procedure_caller
from app.infrastructure.person_repository import SqlAlchemyPersonRepository
from app.services.transaction_relay import TransactionRelay


def get_person_repository(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SqlAlchemyPersonRepository:
    return SqlAlchemyPersonRepository(db, settings.storage_options())


def get_transaction_relay(
    caller: ProcedureCaller = Depends(get_procedure_caller),
    settings: Settings = Depends(get_settings),
) -> TransactionRelay:
    return TransactionRelay(
        caller, settings.relay_routing(), settings.storage_options(),
    )
