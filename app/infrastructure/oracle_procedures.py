"""Oracle Procedure Caller — one python-oracledb connection per stored-procedure call.

Invariants:
    - The connection is opened for exactly one call and closed on every exit path
    - IN parameters are bound positionally, followed by the payload CLOB and the
      two OUT variables (status NUMBER, message VARCHAR2 of message_capacity)
    - The payload is bound as a temporary CLOB, never truncated or re-encoded
    - Driver exceptions propagate unchanged; classification happens in the relay
"""

import logging
from typing import Sequence

import oracledb

logger = logging.getLogger(__name__)


class OracleProcedureCaller:
    """ProcedureCaller over the python-oracledb asyncio API."""

    def __init__(self, connect_args: dict):
        self._connect_args = connect_args

    async def call(
        self,
        procedure: str,
        in_params: Sequence[str],
        payload: str,
        message_capacity: int,
        autocommit: bool,
    ) -> tuple[object, object]:
        async with oracledb.connect_async(**self._connect_args) as connection:
            connection.autocommit = autocommit
            payload_lob = await connection.createlob(oracledb.DB_TYPE_CLOB, payload)
            with connection.cursor() as cursor:
                status_var = cursor.var(oracledb.DB_TYPE_NUMBER)
                message_var = cursor.var(oracledb.DB_TYPE_VARCHAR, message_capacity)
                await cursor.callproc(
                    procedure,
                    [*in_params, payload_lob, status_var, message_var],
                )
                logger.debug(
                    f"Called {procedure}",
                    extra={"procedure": procedure},
                )
                return status_var.getvalue(), message_var.getvalue()


# Singleton (initialized on startup)
procedure_caller: OracleProcedureCaller | None = None


def init_procedure_caller(connect_args: dict) -> OracleProcedureCaller:
    global procedure_caller
    procedure_caller = OracleProcedureCaller(connect_args)
    return procedure_caller


def get_procedure_caller() -> OracleProcedureCaller:
    """FastAPI dependency for the relay's procedure caller."""
    if not procedure_caller:
        raise RuntimeError("Procedure caller not initialized")
    return procedure_caller
