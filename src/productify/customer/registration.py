"""Customer registration — command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String

from productify.customer import persistence
from productify.customer.customer import ContactInfo, Customer
from productify.domain import productify

logger = structlog.get_logger(__name__)


@productify.command(part_of="Customer")
class RegisterCustomer:
    """Create a new customer with its company and contact names."""

    customer_id: Identifier(required=True)
    company_name: String(required=True, max_length=255)
    contact_name: String(required=True, max_length=255)
    contact_title: String(max_length=100)
    phone_number: String(max_length=50)
    fax_number: String(max_length=50)


@productify.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        if persistence.exists(command.customer_id):
            raise ValidationError({"id": [f"Customer {command.customer_id} already exists"]})

        customer = Customer.create_new_customer(
            id=command.customer_id,
            company_name=command.company_name,
            contact_name=command.contact_name,
        )
        # Optional details are recorded without raising change events
        if command.contact_title:
            customer.contact_info = ContactInfo(
                contact_name=command.contact_name,
                contact_title=command.contact_title,
            )
        customer.phone_number = command.phone_number
        customer.fax_number = command.fax_number

        result = customer.validate_for_registration()
        if not result.is_valid:
            logger.info("Customer registration rejected", customer_id=str(customer.id), violations=result.messages)
            result.raise_if_invalid()

        persistence.save(customer)
        logger.info("Customer registered", customer_id=str(customer.id))
        return str(customer.id)
