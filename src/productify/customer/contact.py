"""Customer contact and company details — commands and handler."""

from protean import handle
from protean.fields import Identifier, String

from productify.customer import persistence
from productify.customer.customer import Customer
from productify.domain import productify


@productify.command(part_of="Customer")
class UpdateContactDetails:
    """Replace the customer's phone and fax numbers. Omitted numbers are cleared."""

    customer_id: Identifier(required=True)
    phone_number: String(max_length=50)
    fax_number: String(max_length=50)


@productify.command(part_of="Customer")
class ChangeContact:
    customer_id: Identifier(required=True)
    contact_name: String(required=True, max_length=255)
    contact_title: String(max_length=100)


@productify.command(part_of="Customer")
class RenameCompany:
    customer_id: Identifier(required=True)
    company_name: String(required=True, max_length=255)


@productify.command_handler(part_of=Customer)
class ManageContactHandler:
    @handle(UpdateContactDetails)
    def update_contact_details(self, command):
        customer = persistence.load(command.customer_id)
        customer.update_contact_details(
            phone_number=command.phone_number,
            fax_number=command.fax_number,
        )
        persistence.save(customer)

    @handle(ChangeContact)
    def change_contact(self, command):
        customer = persistence.load(command.customer_id)
        customer.change_contact(command.contact_name, contact_title=command.contact_title)
        persistence.save(customer)

    @handle(RenameCompany)
    def rename_company(self, command):
        customer = persistence.load(command.customer_id)
        customer.rename(command.company_name)
        persistence.save(customer)
