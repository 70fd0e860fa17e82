"""Transaction Route — relays a business document to the backend procedure.

Invariants:
    - The document is parsed into TransactionDocument before any call; the raw
      body, extra fields included, is what gets relayed
    - Validation failures → 400 {errores}; backend rejections → 400 {mensaje, codigo};
      call failures → 500 {mensaje, detalle}; acceptance → 200 {mensaje, codigo}
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_transaction_relay
from app.core.response_translator import relay_response
from app.core.validation import parse_body
from app.schemas.transaction import TransactionDocument
from app.services.transaction_relay import TransactionRelay

router = APIRouter(tags=["transaccion"])


@router.post("/transaccion")
async def relay_transaccion(
    payload: Any = Body(None),
    relay: TransactionRelay = Depends(get_transaction_relay),
):
    """Forward one TransactionDocument and translate the procedure's OUT parameters."""
    parse_body(TransactionDocument, payload)
    outcome = await relay.relay(payload)
    status_code, body = relay_response(outcome)
    return JSONResponse(status_code=status_code, content=body)
