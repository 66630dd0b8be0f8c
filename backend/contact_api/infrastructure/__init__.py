"""Infrastructure Layer — storage implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Stores satisfy core.repository_protocols structurally
"""
