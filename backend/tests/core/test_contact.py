"""Contact Record — verifies the plain entity and its copy semantics.

Tests cover:
    - Defaults for number and type
    - is_business matches "Business" exactly
    - copy() is independent of the original
"""

from contact_api.core.contact import BUSINESS_CONTACT_TYPE, Contact, ContactName


def test_number_and_type_default_to_empty():
    contact = Contact(name="nonzero")
    assert contact.number == ""
    assert contact.type == ""


def test_business_constant_value():
    assert BUSINESS_CONTACT_TYPE == "Business"


def test_is_business_exact_match():
    assert Contact(name="a", type="Business").is_business
    assert not Contact(name="a", type="business").is_business
    assert not Contact(name="a", type="person").is_business
    assert not Contact(name="a").is_business


def test_copy_is_equal_but_independent():
    original = Contact(name="nonzero", number="555", type="person")
    clone = original.copy()
    assert clone == original
    assert clone is not original
    clone.number = "999"
    assert original.number == "555"


def test_contact_name_wraps_str():
    assert ContactName("nonzero") == "nonzero"
