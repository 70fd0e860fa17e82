"""Person Repository — parameterized CRUD over the personas table.

Invariants:
    - Every statement is built with SQLAlchemy bound parameters (no string SQL)
    - Zero affected rows on update/delete raises RecordNotFoundError, never StorageError
    - Any SQLAlchemy/driver error is logged in full and re-raised as StorageError
      with a generic, operation-specific client message
    - Writes commit immediately when StorageOptions.autocommit is set
    - The session (and its connection) is owned by the caller's session context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import StorageOptions
from app.core.errors import RecordNotFoundError, StorageError
from app.models.person import Person

logger = logging.getLogger(__name__)

RESOURCE = "Persona"

CLIENT_MESSAGES = {
    "create": "Error al insertar en Oracle",
    "list_all": "Error al obtener personas",
    "get_by_id": "Error al obtener persona",
    "update": "Error al actualizar persona",
    "delete": "Error al eliminar persona",
}


class SqlAlchemyPersonRepository:
    """PersonRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession, options: StorageOptions):
        self._db = db
        self._options = options

    async def create(self, nombre: str, edad: int, correo: str | None) -> int:
        async with self._storage_guard("create"):
            person = Person(nombre=nombre, edad=edad, correo=correo)
            self._db.add(person)
            await self._db.flush()
            person_id = person.id
            await self._finish_write()
        logger.info("Persona inserted", extra={"operation": "create"})
        return person_id

    async def list_all(self) -> Sequence[Person]:
        async with self._storage_guard("list_all"):
            result = await self._db.execute(select(Person))
            return result.scalars().all()

    async def get_by_id(self, person_id: int) -> Person:
        async with self._storage_guard("get_by_id"):
            result = await self._db.execute(
                select(Person).where(Person.id == person_id),
            )
            person = result.scalar_one_or_none()
        if person is None:
            raise RecordNotFoundError(RESOURCE, person_id)
        return person

    async def update(
        self, person_id: int, nombre: str, edad: int, correo: str | None,
    ) -> None:
        async with self._storage_guard("update"):
            result = await self._db.execute(
                update(Person)
                .where(Person.id == person_id)
                .values(nombre=nombre, edad=edad, correo=correo),
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(RESOURCE, person_id)
            await self._finish_write()

    async def delete(self, person_id: int) -> None:
        async with self._storage_guard("delete"):
            result = await self._db.execute(
                delete(Person).where(Person.id == person_id),
            )
            if result.rowcount == 0:
                raise RecordNotFoundError(RESOURCE, person_id)
            await self._finish_write()

    async def _finish_write(self) -> None:
        if self._options.autocommit:
            await self._db.commit()
        else:
            await self._db.flush()

    @asynccontextmanager
    async def _storage_guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                f"personas {operation} failed: {e}",
                extra={"operation": operation},
                exc_info=True,
            )
            raise StorageError(operation, CLIENT_MESSAGES[operation]) from e
