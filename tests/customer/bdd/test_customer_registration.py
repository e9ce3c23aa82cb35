"""BDD tests for customer registration."""

from pytest_bdd import parsers, scenarios, then, when

from productify.customer.customer import Customer
from productify.shared.errors import InvalidArgumentError

scenarios("features/customer_registration.feature")


def _text(value):
    return "   " if value == "(blank)" else value


@when(
    parsers.cfparse('a customer is created with id "{id}" company "{company}" and contact "{contact}"'),
    target_fixture="customer",
)
def create_customer(id, company, contact, error):
    try:
        return Customer.create_new_customer(id=_text(id), company_name=_text(company), contact_name=_text(contact))
    except InvalidArgumentError as exc:
        error["exc"] = exc
        return None


@then(parsers.cfparse('the customer is named "{name}"'))
def customer_named(customer, name):
    assert customer.name == name
    assert str(customer) == name


@then(parsers.cfparse('the customer contact is "{contact}"'))
def customer_contact(customer, contact):
    assert customer.contact_info.contact_name == contact


@then("the customer has no orders")
def no_orders(customer):
    assert customer.orders == ()


@then(parsers.cfparse('the creation fails for argument "{argument}"'))
def creation_fails(customer, error, argument):
    assert customer is None
    assert isinstance(error["exc"], InvalidArgumentError)
    assert error["exc"].argument == argument
