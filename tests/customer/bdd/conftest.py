"""Shared BDD fixtures and step definitions for customers."""

import pytest
from pytest_bdd import given, parsers, then

from productify.customer.customer import Customer
from productify.customer.events import CustomerRegistered, OrderRecorded

_EVENT_CLASSES = {
    "CustomerRegistered": CustomerRegistered,
    "OrderRecorded": OrderRecorded,
}


@pytest.fixture()
def error():
    """Container for captured creation errors."""
    return {"exc": None}


@given("a registered customer", target_fixture="customer")
def registered_customer():
    customer = Customer.create_new_customer(
        id="ALFKI",
        company_name="Alfreds Futterkiste",
        contact_name="Maria Anders",
    )
    return customer


@given(parsers.cfparse('the customer has phone number "{phone}"'))
def customer_has_phone(customer, phone):
    customer.update_contact_details(phone_number=phone)


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(customer, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in customer._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in customer._events]}"
