"""Boundary Protocols — contract between the service and contact storage.

Invariants:
    - Core NEVER imports from infrastructure: dependency arrows point inward only
    - A repository exposes exactly create and retrieve
    - create is insert-if-absent: a second create for the same name is a no-op
    - retrieve returns None for unknown names, never raises for that case

Design Decisions:
    - Protocol over ABC: structural subtyping, any store with these two methods plugs in
    - Synchronous methods: the only shipped store is in-memory, nothing to await
"""

from typing import Protocol

from contact_api.core.contact import Contact, ContactName


class ContactRepository(Protocol):
    """Contract for contact persistence — implemented by infrastructure."""
    def create(self, contact: Contact) -> None: ...
    def retrieve(self, name: ContactName) -> Contact | None: ...
