"""Contact Schemas — Pydantic models for the contacts endpoints.

Invariants:
    - ContactPayload.name must contain a non-whitespace character and is kept verbatim
      (it is the lookup key, so GET must find exactly what POST sent)
    - number and type are optional: absent, null and "" all mean ""
    - Business rules are NOT checked here; ContactService owns them
"""

from pydantic import BaseModel, Field, field_validator

from contact_api.core.contact import Contact


class ContactPayload(BaseModel):
    """Contact creation body."""
    name: str = Field(min_length=1)
    number: str | None = ""
    type: str | None = ""

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v

    def to_domain(self) -> Contact:
        return Contact(
            name=self.name, number=self.number or "", type=self.type or "",
        )


class ContactResponse(BaseModel):
    """Contact as returned by GET."""
    name: str
    number: str
    type: str

    @classmethod
    def from_domain(cls, contact: Contact) -> "ContactResponse":
        return cls(name=contact.name, number=contact.number, type=contact.type)
