import os

import pytest


@pytest.fixture(scope="session")
def _productify_domain(request):
    """Initialize the productify domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from productify.domain import productify

    productify.init()
    return productify


@pytest.fixture(scope="session", autouse=True)
def setup_db(_productify_domain):
    from productify.utils.db import drop_db, setup_db

    setup_db(_productify_domain)

    yield

    drop_db(_productify_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_productify_domain):
    """Push domain context before each test; reset stores and adapters after."""
    ctx = _productify_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    from productify.pricing import reset_pricer
    from productify.validation import reset_rule_sets

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    reset_rule_sets()
    reset_pricer()


@pytest.fixture()
def alfreds():
    """A freshly created, unsaved customer with no contact numbers and no orders."""
    from productify.customer.customer import Customer

    customer = Customer.create_new_customer(
        id="ALFKI",
        company_name="Alfreds Futterkiste",
        contact_name="Maria Anders",
    )
    return customer
