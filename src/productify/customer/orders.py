"""Order recording — command and handler.

Orders are only accepted from customers whose rule-sets allow ordering.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer

from productify.customer import persistence
from productify.customer.customer import Customer
from productify.domain import productify

logger = structlog.get_logger(__name__)


@productify.command(part_of="Customer")
class RecordOrder:
    customer_id: Identifier(required=True)
    unit_price: Float(required=True, min_value=0.0)
    quantity: Integer(default=1, min_value=1)
    discount: Float(default=0.0, min_value=0.0, max_value=1.0)
    freight: Float(default=0.0, min_value=0.0)


@productify.command_handler(part_of=Customer)
class RecordOrderHandler:
    @handle(RecordOrder)
    def record_order(self, command):
        customer = persistence.load(command.customer_id)

        if not customer.can_make_orders:
            messages = {
                **customer.validate_for_registration().messages,
                **customer.validate_for_ordering().messages,
            }
            logger.info("Order refused", customer_id=str(customer.id), violations=messages)
            raise ValidationError({"customer": [f"Customer {customer.id} cannot make orders"], **messages})

        order = customer.record_order(
            unit_price=command.unit_price,
            quantity=command.quantity,
            discount=command.discount,
            freight=command.freight,
        )
        persistence.save(customer)
        logger.info("Order recorded", customer_id=str(customer.id), order_id=str(order.id))
        return str(order.id)
