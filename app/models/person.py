"""Person ORM — the personas table.

Invariants:
    - id is generated by storage (identity column) and never assigned by the app
    - nombre non-nullable, edad non-nullable integer, correo nullable
    - Field constraints (non-empty nombre, edad >= 0, valid correo) are enforced
      by schemas/person.PersonIn before any write, not by the table
"""

from sqlalchemy import Identity, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Person(Base):
    """One row of personas."""
    __tablename__ = "personas"

    id: Mapped[int] = mapped_column(
        Integer, Identity(), primary_key=True,
    )
    nombre: Mapped[str] = mapped_column(String(100), nullable=False)
    edad: Mapped[int] = mapped_column(Integer, nullable=False)
    correo: Mapped[str | None] = mapped_column(String(150), nullable=True)
