"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes validate, delegate and translate; no SQL in routes
"""
