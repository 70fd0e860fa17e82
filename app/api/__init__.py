"""API Layer — FastAPI routes, dependencies, credential gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies except the 401 challenge
"""
