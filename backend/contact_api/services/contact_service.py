"""Contact Service — validates input and delegates to a ContactRepository.

Invariants:
    - Repository is injected at construction; None fails immediately with ConfigurationError
    - retrieve("") / retrieve(None) return None without touching the repository
    - create raises ValidationError for a missing contact or a Business contact without number
    - A rejected contact never reaches the repository

Design Decisions:
    - Explicit constructor injection over a DI container: wiring lives in main.lifespan
    - Rules come from core.enforce_contact; this class only maps descriptors to errors
"""

import logging

from contact_api.core.contact import Contact, ContactName
from contact_api.core.enforce_contact import is_lookup_name, validate_contact_creation
from contact_api.core.errors import ConfigurationError, ErrorContext, ValidationError
from contact_api.core.repository_protocols import ContactRepository

logger = logging.getLogger(__name__)


class ContactService:
    """Create and retrieve contacts through an injected repository."""

    def __init__(self, repository: ContactRepository | None):
        if repository is None:
            raise ConfigurationError("ContactService requires a contact repository")
        self._repository = repository

    def retrieve(self, name: ContactName | None) -> Contact | None:
        if not is_lookup_name(name):
            return None
        return self._repository.retrieve(name)

    def create(self, contact: Contact | None) -> None:
        error = validate_contact_creation(contact)
        if error:
            contact_name = contact.name if contact is not None else None
            rejection = ValidationError(
                error["message"], error["field"], error["error_code"],
                ErrorContext(contact_name=contact_name),
            )
            logger.warning(
                f"Contact rejected: {rejection.message}",
                extra=rejection.to_log_extra(),
            )
            raise rejection
        self._repository.create(contact)
        logger.info(
            f"Contact '{contact.name}' accepted",
            extra={"contact_name": contact.name},
        )
