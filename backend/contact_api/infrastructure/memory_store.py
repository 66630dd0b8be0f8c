"""In-Memory Contact Store — process-lifetime ContactRepository.

Invariants:
    - At most one contact per name; first writer wins
    - create on an existing name is a silent no-op (no overwrite, no error)
    - Check-and-insert happens under one lock acquisition, so concurrent
      creates for the same new name store exactly one record
    - Callers get copies: mutating a returned contact never touches the store

Design Decisions:
    - dict + threading.Lock: request handlers may run in FastAPI's threadpool
    - Volatile by nature: contents reset on process restart
"""

import logging
import threading

from contact_api.core.contact import Contact, ContactName

logger = logging.getLogger(__name__)


class InMemoryContactRepository:
    """Mutex-guarded name → Contact mapping."""

    def __init__(self):
        self._contacts: dict[ContactName, Contact] = {}
        self._lock = threading.Lock()

    def create(self, contact: Contact) -> None:
        with self._lock:
            if contact.name in self._contacts:
                inserted = False
            else:
                self._contacts[contact.name] = contact.copy()
                inserted = True
        if not inserted:
            logger.debug(
                f"Contact '{contact.name}' already stored, create ignored",
                extra={"contact_name": contact.name},
            )

    def retrieve(self, name: ContactName) -> Contact | None:
        with self._lock:
            stored = self._contacts.get(name)
        return stored.copy() if stored is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)
