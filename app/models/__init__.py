"""ORM Models — SQLAlchemy declarative models for locally persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only personas is stored locally; transaction documents live in the backend

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete once app.models is imported
"""

from app.models.person import Person  # noqa: F401
