"""Transaction Relay — forwards one validated document to the backend procedure.

Invariants:
    - Exactly one procedure call per relay(); nothing is retried
    - Routing constants (sender, receiver, operation, token) come from RelayRouting,
      never from the request
    - The document is serialized once with json.dumps(ensure_ascii=False) and sent whole
    - relay() never raises for driver/transport failures: it returns RelayFailed and
      logs the real error server-side
"""

import json
import logging
from typing import Any

from app.config import RelayRouting, StorageOptions
from app.core.relay_outcome import (
    RelayFailed, RelayOutcome, RelayRejected, classify_procedure_result,
)
from app.core.repository_protocols import ProcedureCaller

logger = logging.getLogger(__name__)


def serialize_document(document: dict[str, Any]) -> str:
    """Canonical text form of the document sent as the CLOB payload."""
    return json.dumps(document, ensure_ascii=False)


class TransactionRelay:
    """Binds routing constants plus the serialized document and classifies the result."""

    def __init__(
        self,
        caller: ProcedureCaller,
        routing: RelayRouting,
        options: StorageOptions,
    ):
        self._caller = caller
        self._routing = routing
        self._options = options

    def in_params(self) -> list[str]:
        """The four fixed IN parameters, in procedure order."""
        r = self._routing
        return [r.sender, r.receiver, r.operation, r.token]

    async def relay(self, document: dict[str, Any]) -> RelayOutcome:
        payload = serialize_document(document)
        try:
            code, message = await self._caller.call(
                self._routing.procedure,
                self.in_params(),
                payload,
                self._routing.message_capacity,
                self._options.autocommit,
            )
        except Exception as e:
            logger.error(
                f"Procedure {self._routing.procedure} failed: {e}",
                extra={"procedure": self._routing.procedure},
                exc_info=True,
            )
            return RelayFailed(str(e))

        outcome = classify_procedure_result(code, message)
        if isinstance(outcome, RelayFailed):
            logger.error(
                f"Procedure {self._routing.procedure}: {outcome.detail}",
                extra={"procedure": self._routing.procedure},
            )
        elif isinstance(outcome, RelayRejected):
            logger.warning(
                f"Procedure {self._routing.procedure} rejected document: {outcome.message}",
                extra={"procedure": self._routing.procedure, "codigo": outcome.code},
            )
        return outcome
