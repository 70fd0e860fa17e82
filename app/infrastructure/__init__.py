"""Infrastructure Layer — database sessions, Oracle procedure calls, logging.

Invariants:
    - Every connection is scoped to one request or one call and always released
    - Driver exceptions are mapped to core/errors types or relay outcomes at this boundary
"""
