"""Persona Schemas — request body for create and full update.

Invariants:
    - nombre: string with at least one non-blank character
    - edad: integer >= 0, sent as a JSON integer or an integer string
    - correo: optional; when present, a syntactically valid address (no DNS lookup)
    - PUT uses the same model as POST: no partial updates

Design Decisions:
    - StrictInt so booleans and 3.0 never pass as an age; integer strings are
      converted by a before-validator, capped at Oracle NUMBER precision
    - field_messages carries the Spanish client message reported per field
"""

import re
from typing import ClassVar

from pydantic import BaseModel, EmailStr, Field, StrictInt, StrictStr, field_validator

from app.schemas.common import INVALID_EMAIL

_INTEGER_TEXT = re.compile(r"^[-+]?[0-9]{1,38}$")


class PersonIn(BaseModel):
    """Persona body — nombre, edad and optional correo."""
    field_messages: ClassVar[dict[str, str]] = {
        "nombre": "El nombre es obligatorio",
        "edad": "Edad debe ser un número entero positivo",
        "correo": INVALID_EMAIL,
    }

    nombre: StrictStr
    edad: StrictInt = Field(ge=0)
    correo: EmailStr | None = None

    @field_validator("nombre")
    @classmethod
    def nombre_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("nombre cannot be empty or whitespace")
        return v

    @field_validator("edad", mode="before")
    @classmethod
    def integer_text_to_int(cls, v):
        if isinstance(v, str) and _INTEGER_TEXT.match(v):
            return int(v)
        return v
