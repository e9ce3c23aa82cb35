"""Persistence for Customer aggregates.

Saving and deleting go through the aggregate's capability checks first; an
aggregate that refuses is never handed to the repository. Loading rehydrates
through the repository, which builds customers with the plain constructor.
"""

import structlog
from protean.exceptions import InvalidOperationError
from protean.utils.globals import current_domain

from productify.customer.customer import Customer, Order
from productify.shared.aggregate_root import AggregateRoot

logger = structlog.get_logger(__name__)


def _repository():
    return current_domain.repository_for(Customer)


def _ensure_aggregate_root(customer) -> None:
    if not isinstance(customer, AggregateRoot):
        raise TypeError(f"{type(customer).__name__} does not report save/delete capabilities")


def save(customer: Customer) -> Customer:
    """Persist ``customer``; refuses customers that cannot be saved."""
    _ensure_aggregate_root(customer)
    if not customer.can_be_saved:
        logger.warning(
            "Refusing to save customer that is not valid for registration",
            customer_id=str(customer.id),
            violations=customer.validate_for_registration().messages,
        )
        raise InvalidOperationError(f"Customer {customer.id} cannot be saved")

    _repository().add(customer)
    return customer


def delete(customer: Customer) -> None:
    """Remove ``customer`` from storage; refuses customers that cannot be deleted."""
    _ensure_aggregate_root(customer)
    if not customer.can_be_deleted:
        raise InvalidOperationError(f"Customer {customer.id} cannot be deleted")

    logger.info("Deleting customer", customer_id=str(customer.id), orders=len(customer.orders))

    # Orders are owned by the customer and go with it
    order_dao = current_domain.repository_for(Order)._dao
    for order in customer.orders:
        order_dao.delete(order)

    _repository()._dao.delete(customer)


def load(customer_id: str) -> Customer:
    """Rehydrate a stored customer. Raises ObjectNotFoundError when it does not exist."""
    return _repository().get(customer_id)


def exists(customer_id: str) -> bool:
    return bool(_repository()._dao.query.filter(id=customer_id).all().items)
