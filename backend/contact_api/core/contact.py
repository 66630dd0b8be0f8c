"""Contact Record — the single domain entity of the contact book.

Invariants:
    - name is the identity; no other key exists
    - Entity enforces nothing itself: validation lives in enforce_contact
    - BUSINESS_CONTACT_TYPE is the single source of truth for the type that needs a number

Design Decisions:
    - Plain mutable dataclass: stores hand out copies instead of freezing the record
"""

from dataclasses import dataclass, replace
from typing import NewType


ContactName = NewType("ContactName", str)

BUSINESS_CONTACT_TYPE: str = "Business"


@dataclass
class Contact:
    """A name/number/type triple."""
    name: str
    number: str = ""
    type: str = ""

    @property
    def is_business(self) -> bool:
        return self.type == BUSINESS_CONTACT_TYPE

    def copy(self) -> "Contact":
        return replace(self)
