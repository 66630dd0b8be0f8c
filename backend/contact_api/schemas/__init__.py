"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Domain entity from core/ is what crosses into the service layer

Design Decisions:
    - Separate from core.contact: schemas are API contracts, Contact is the domain record
"""
