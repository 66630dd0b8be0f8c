"""Core Layer — pure domain logic, no IO, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validation rules are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: rules return descriptors,
      the service layer decides what to raise
"""
