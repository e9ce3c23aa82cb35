"""Customer aggregate root with Order entity, Organization and ContactInfo value objects."""

from datetime import datetime
from decimal import Decimal

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from productify.customer.events import (
    CompanyRenamed,
    ContactChanged,
    ContactDetailsUpdated,
    CustomerRegistered,
    OrderRecorded,
)
from productify.domain import productify
from productify.pricing import get_pricer
from productify.shared.errors import require_text
from productify.validation import CAN_MAKE_ORDERS, IS_VALID_FOR_REGISTRATION, get_rule_set

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@productify.value_object(part_of="Customer")
class Organization:
    """The company a customer represents. Shared by every kind of organization the business deals with."""

    name: String(required=True, max_length=255)


@productify.value_object(part_of="Customer")
class ContactInfo:
    """The person to talk to at the customer's company.

    Replaced wholesale when the contact changes.
    """

    contact_name: String(required=True, max_length=255)
    contact_title: String(max_length=100)


@productify.entity(part_of="Customer")
class Order:
    """An order placed by the customer.

    Amounts are stored as recorded; pricing them is the job of the configured
    order pricer.
    """

    ordered_at: DateTime(default=datetime.now)
    unit_price: Float(required=True, min_value=0.0)
    quantity: Integer(default=1, min_value=1)
    discount: Float(default=0.0, min_value=0.0, max_value=1.0)
    freight: Float(default=0.0, min_value=0.0)


@productify.aggregate
class Customer:
    """A company that buys from us, identified by a short customer id.

    New customers come from ``create_new_customer``, which refuses missing or
    blank identifiers. The plain constructor is what the repository uses to
    rehydrate stored customers and performs no such checks.

    Whether a customer is fit for registration or for ordering is decided by
    validation rule-sets, evaluated on every access.
    """

    id: Identifier(identifier=True, required=True)
    organization: ValueObject(Organization)
    contact_info: ValueObject(ContactInfo)
    phone_number: String(max_length=50)
    fax_number: String(max_length=50)
    placed_orders: HasMany(Order)

    @classmethod
    def create_new_customer(cls, id, company_name, contact_name):
        require_text("id", id)
        require_text("company_name", company_name)
        require_text("contact_name", contact_name)

        customer = cls(
            id=id,
            organization=Organization(name=company_name),
            contact_info=ContactInfo(contact_name=contact_name),
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                company_name=company_name,
                contact_name=contact_name,
                registered_at=datetime.now(),
            )
        )
        return customer

    @property
    def name(self):
        """The company name."""
        return self.organization.name if self.organization else None

    @property
    def orders(self):
        """Snapshot of the customer's orders; mutate through ``record_order``."""
        return tuple(self.placed_orders or ())

    def update_contact_details(self, phone_number=_UNSET, fax_number=_UNSET):
        if phone_number is not _UNSET:
            self.phone_number = phone_number
        if fax_number is not _UNSET:
            self.fax_number = fax_number

        self.raise_(
            ContactDetailsUpdated(
                customer_id=self.id,
                phone_number=self.phone_number,
                fax_number=self.fax_number,
            )
        )

    def change_contact(self, contact_name, contact_title=None):
        require_text("contact_name", contact_name)

        self.contact_info = ContactInfo(contact_name=contact_name, contact_title=contact_title)
        self.raise_(
            ContactChanged(
                customer_id=self.id,
                contact_name=contact_name,
                contact_title=contact_title,
            )
        )

    def rename(self, company_name):
        require_text("company_name", company_name)

        previous_name = self.name
        self.organization = Organization(name=company_name)
        self.raise_(
            CompanyRenamed(
                customer_id=self.id,
                previous_name=previous_name,
                company_name=company_name,
            )
        )

    def record_order(self, unit_price, quantity=1, discount=0.0, freight=0.0, ordered_at=None):
        order = Order(
            unit_price=unit_price,
            quantity=quantity,
            discount=discount,
            freight=freight,
            ordered_at=ordered_at or datetime.now(),
        )
        self.add_placed_orders(order)

        self.raise_(
            OrderRecorded(
                customer_id=self.id,
                order_id=order.id,
                unit_price=order.unit_price,
                quantity=order.quantity,
                discount=order.discount,
                freight=order.freight,
                ordered_at=order.ordered_at,
            )
        )
        return order

    def total_income(self, pricer=None) -> Decimal:
        """Sum of the prices of all orders, in exact decimal arithmetic."""
        pricer = pricer if pricer is not None else get_pricer()
        return sum((pricer.price(order) for order in self.orders), Decimal("0"))

    def validate_for_registration(self, rule_set=None):
        """Full registration validation result, for diagnostics."""
        if rule_set is None:
            rule_set = get_rule_set(IS_VALID_FOR_REGISTRATION)
        return rule_set.evaluate(self)

    def validate_for_ordering(self, rule_set=None):
        if rule_set is None:
            rule_set = get_rule_set(CAN_MAKE_ORDERS)
        return rule_set.evaluate(self)

    @property
    def is_valid_for_registration(self) -> bool:
        return self.validate_for_registration().is_valid

    def check_can_make_orders(self, ordering_rules=None, registration_rules=None) -> bool:
        # Both rule-sets are always evaluated
        ordering_ok = self.validate_for_ordering(ordering_rules).is_valid
        registration_ok = self.validate_for_registration(registration_rules).is_valid
        return ordering_ok and registration_ok

    @property
    def can_make_orders(self) -> bool:
        return self.check_can_make_orders()

    @property
    def can_be_saved(self) -> bool:
        return self.is_valid_for_registration

    @property
    def can_be_deleted(self) -> bool:
        # No check against existing orders
        return True

    def __str__(self):
        return self.name or ""
