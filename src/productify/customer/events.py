"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from productify.domain import productify


@productify.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was created with its company and contact names."""

    __version__ = 1

    customer_id: Identifier(required=True)
    company_name: String(required=True)
    contact_name: String(required=True)
    registered_at: DateTime(required=True)


@productify.event(part_of="Customer")
class ContactDetailsUpdated:
    """The customer's phone or fax number changed."""

    __version__ = 1

    customer_id: Identifier(required=True)
    phone_number: String()
    fax_number: String()


@productify.event(part_of="Customer")
class ContactChanged:
    """A different person (or title) became the customer's contact."""

    __version__ = 1

    customer_id: Identifier(required=True)
    contact_name: String(required=True)
    contact_title: String()


@productify.event(part_of="Customer")
class CompanyRenamed:
    __version__ = 1

    customer_id: Identifier(required=True)
    previous_name: String()
    company_name: String(required=True)


@productify.event(part_of="Customer")
class OrderRecorded:
    """An order was added to the customer's order history."""

    __version__ = 1

    customer_id: Identifier(required=True)
    order_id: Identifier(required=True)
    unit_price: Float(required=True)
    quantity: Integer(required=True)
    discount: Float()
    freight: Float()
    ordered_at: DateTime(required=True)
