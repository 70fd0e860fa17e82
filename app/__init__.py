"""Personas Gateway — HTTP gateway for personas CRUD and transaction relay.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
