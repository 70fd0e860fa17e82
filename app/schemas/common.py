"""Shared Field Types — constrained types reused by the request schemas.

Invariants:
    - NonEmptyText: a JSON string with at least one character, never coerced
    - Timestamp: JSON integer, finite float or numeric string; booleans rejected
"""

from typing import Annotated, Union

from pydantic import Field, StrictInt, StringConstraints

INVALID_EMAIL = "Correo inválido"

NonEmptyText = Annotated[str, Field(strict=True, min_length=1)]

Timestamp = Union[
    StrictInt,
    Annotated[float, Field(strict=True, allow_inf_nan=False)],
    Annotated[str, StringConstraints(pattern=r"^[-+]?([0-9]*\.)?[0-9]+$")],
]
