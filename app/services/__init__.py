"""Services Layer — orchestration between validated input and infrastructure.

Invariants:
    - Services receive their IO collaborators through constructor arguments
"""
