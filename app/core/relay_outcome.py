"""Relay Outcome — tagged result of one stored-procedure relay call.

Invariants:
    - Exactly three variants: RelayAccepted, RelayRejected, RelayFailed
    - code/message on Accepted and Rejected come from the procedure's OUT parameters
    - RelayFailed.detail is server-side only; it never reaches a response body
    - classify_procedure_result() is PURE

Design Decisions:
    - Frozen dataclasses + Union instead of exceptions: the relay returns every
      outcome as a value and the translator maps each variant to its own status
"""

from dataclasses import dataclass
from typing import Union

SUCCESS_CODE = 0


@dataclass(frozen=True)
class RelayAccepted:
    """Procedure ran and reported code 0."""
    code: int
    message: str


@dataclass(frozen=True)
class RelayRejected:
    """Procedure ran and rejected the business content (code != 0)."""
    code: int
    message: str


@dataclass(frozen=True)
class RelayFailed:
    """The call never produced a usable result (driver, transport, bind)."""
    detail: str


RelayOutcome = Union[RelayAccepted, RelayRejected, RelayFailed]


def classify_procedure_result(code: object, message: object) -> RelayOutcome:
    """Map the raw OUT parameters of one call to an outcome variant."""
    if code is None:
        return RelayFailed("procedure returned NULL status code")
    try:
        numeric = int(code)
    except (TypeError, ValueError, OverflowError):
        return RelayFailed(f"procedure returned non-numeric status code {code!r}")
    if numeric != code:
        return RelayFailed(f"procedure returned non-integer status code {code!r}")
    text = "" if message is None else str(message)
    if numeric == SUCCESS_CODE:
        return RelayAccepted(numeric, text)
    return RelayRejected(numeric, text)
