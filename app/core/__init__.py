"""Core Layer — request validation, error types, relay outcomes and response shapes.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async, no DB

Design Decisions:
    - Functional core separated from imperative shell
"""
