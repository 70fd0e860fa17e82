"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol, Sequence


class PersonLike(Protocol):
    """Structural contract for a personas row."""
    id: int
    nombre: str
    edad: int
    correo: str | None


class PersonRepository(Protocol):
    """Contract for personas persistence — implemented by shell."""
    async def create(self, nombre: str, edad: int, correo: str | None) -> int: ...
    async def list_all(self) -> Sequence[PersonLike]: ...
    async def get_by_id(self, person_id: int) -> PersonLike: ...
    async def update(
        self, person_id: int, nombre: str, edad: int, correo: str | None,
    ) -> None: ...
    async def delete(self, person_id: int) -> None: ...


class ProcedureCaller(Protocol):
    """Contract for one stored-procedure call with five IN and two OUT parameters.

    Returns the raw (status code, message) OUT values. Raises on any
    transport or driver failure.
    """
    async def call(
        self,
        procedure: str,
        in_params: Sequence[str],
        payload: str,
        message_capacity: int,
        autocommit: bool,
    ) -> tuple[object, object]: ...
