"""Response Translator — maps repository and relay outcomes to (status, body).

Invariants:
    - All functions are PURE: they build status codes and dicts, nothing else
    - Validation 400 ({errores}) and business 400 ({mensaje, codigo}) never share a shape
    - RelayFailed always becomes the generic InfrastructureError body
"""

from app.core.errors import BusinessError, InfrastructureError
from app.core.relay_outcome import (
    RelayAccepted, RelayFailed, RelayOutcome, RelayRejected,
)

MSG_INSERTED = "Datos insertados correctamente"
MSG_UPDATED = "Persona actualizada correctamente"
MSG_DELETED = "Persona eliminada correctamente"


def person_to_dict(person) -> dict:
    """Public JSON shape of one personas row."""
    return {
        "id": person.id,
        "nombre": person.nombre,
        "edad": person.edad,
        "correo": person.correo,
    }


def created_response(person_id: int) -> dict:
    return {"mensaje": MSG_INSERTED, "id": person_id}


def updated_response() -> dict:
    return {"mensaje": MSG_UPDATED}


def deleted_response() -> dict:
    return {"mensaje": MSG_DELETED}


def relay_response(outcome: RelayOutcome) -> tuple[int, dict]:
    """Translate one relay outcome. Each variant has its own status."""
    if isinstance(outcome, RelayAccepted):
        return 200, {"mensaje": outcome.message, "codigo": outcome.code}
    if isinstance(outcome, RelayRejected):
        error = BusinessError(outcome.code, outcome.message)
        return error.http_status, error.to_response()
    if isinstance(outcome, RelayFailed):
        error = InfrastructureError("relay")
        return error.http_status, error.to_response()
    raise TypeError(f"Unknown relay outcome: {outcome!r}")
