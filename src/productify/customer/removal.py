"""Customer removal — command and handler."""

from protean import handle
from protean.fields import Identifier

from productify.customer import persistence
from productify.customer.customer import Customer
from productify.domain import productify


@productify.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


@productify.command_handler(part_of=Customer)
class DeleteCustomerHandler:
    @handle(DeleteCustomer)
    def delete_customer(self, command):
        customer = persistence.load(command.customer_id)
        persistence.delete(customer)
