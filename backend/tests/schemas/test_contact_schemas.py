"""Contact Schemas — boundary validation and domain conversion.

Invariants:
    - name is required, must contain a non-whitespace character, and is kept verbatim
    - number and type accept absent, null or "" and all become ""
    - No length limits; Business rule is not enforced by the schema
"""

import pytest
from pydantic import ValidationError

from contact_api.core.contact import Contact
from contact_api.schemas.contact import ContactPayload, ContactResponse


def test_payload_defaults():
    assert ContactPayload(name="nonzero").to_domain() == Contact(name="nonzero")


def test_payload_keeps_name_verbatim():
    assert ContactPayload(name=" padded ").to_domain().name == " padded "


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_payload_rejects_blank_name(name):
    with pytest.raises(ValidationError):
        ContactPayload(name=name)


def test_payload_requires_name():
    with pytest.raises(ValidationError):
        ContactPayload(number="555")


def test_payload_null_number_and_type_become_empty():
    payload = ContactPayload(name="nonzero", number=None, type=None)
    assert payload.to_domain() == Contact(name="nonzero", number="", type="")


def test_payload_has_no_length_limits():
    payload = ContactPayload(name="n" * 1000, number="1" * 500, type="t" * 500)
    contact = payload.to_domain()
    assert len(contact.name) == 1000
    assert len(contact.number) == 500
    assert len(contact.type) == 500


def test_payload_allows_business_without_number():
    payload = ContactPayload(name="Non Zero Inc.", type="Business")
    assert payload.to_domain() == Contact(name="Non Zero Inc.", type="Business")


def test_response_from_domain():
    response = ContactResponse.from_domain(Contact(name="nonzero", number="555", type="person"))
    assert response.model_dump() == {"name": "nonzero", "number": "555", "type": "person"}
