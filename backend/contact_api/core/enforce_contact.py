"""Contact Enforcement — pure rules checked before a contact reaches the store.

Invariants:
    - validate_contact_creation is PURE: returns an error descriptor, never raises
    - Shell (ContactService) maps the descriptor to a ValidationError
    - Any type other than "Business" (empty included) is accepted as-is

Design Decisions:
    - Descriptor dicts over exceptions in core: keeps rules testable without the error hierarchy
"""

from contact_api.core.contact import Contact


def validate_contact_creation(contact: Contact | None) -> dict | None:
    """Check a contact for creation. Returns None when it may be stored."""
    if contact is None:
        return {
            "status": "error",
            "error_code": "CONTACT_MISSING",
            "field": "contact",
            "message": "unable to create contact",
        }

    if contact.is_business and not contact.number:
        return {
            "status": "error",
            "error_code": "BUSINESS_NUMBER_REQUIRED",
            "field": "number",
            "message": "business contacts must have a number",
        }

    return None


def is_lookup_name(name: str | None) -> bool:
    """Empty or missing names never reach the store."""
    return bool(name)
