"""Personas Routes — CRUD over the personas table.

Invariants:
    - Bodies are parsed into PersonIn before the repository is touched
    - PUT replaces nombre, edad and correo together (no partial updates)
    - Repository errors propagate as GatewayError and are rendered by error_handlers
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_person_repository
from app.core.repository_protocols import PersonRepository
from app.core.response_translator import (
    created_response, deleted_response, person_to_dict, updated_response,
)
from app.core.validation import parse_body
from app.schemas.person import PersonIn

logger = logging.getLogger(__name__)
router = APIRouter(tags=["personas"])


def validated_person_fields(payload: Any) -> dict:
    """Return nombre/edad/correo ready for storage, or raise RequestValidationFailed."""
    person = parse_body(PersonIn, payload)
    return person.model_dump()


@router.post("/guardar")
async def guardar_persona(
    payload: Any = Body(None),
    repo: PersonRepository = Depends(get_person_repository),
):
    """Insert one persona."""
    fields = validated_person_fields(payload)
    person_id = await repo.create(**fields)
    return created_response(person_id)


@router.get("/personas")
async def list_personas(
    repo: PersonRepository = Depends(get_person_repository),
):
    people = await repo.list_all()
    return [person_to_dict(p) for p in people]


@router.get("/personas/{person_id}")
async def get_persona(
    person_id: int,
    repo: PersonRepository = Depends(get_person_repository),
):
    person = await repo.get_by_id(person_id)
    return person_to_dict(person)


@router.put("/personas/{person_id}")
async def update_persona(
    person_id: int,
    payload: Any = Body(None),
    repo: PersonRepository = Depends(get_person_repository),
):
    """Replace all mutable fields of one persona."""
    fields = validated_person_fields(payload)
    await repo.update(person_id, **fields)
    return updated_response()


@router.delete("/personas/{person_id}")
async def delete_persona(
    person_id: int,
    repo: PersonRepository = Depends(get_person_repository),
):
    await repo.delete(person_id)
    return deleted_response()
