"""Line pricer — prices an order from its unit price, quantity, discount and freight."""

from decimal import Decimal

from productify.pricing.port import OrderPricingPort


def to_decimal(value) -> Decimal:
    """Convert a stored amount to Decimal without binary floating-point residue.

    Floats go through their shortest repr, so 5.5 becomes Decimal("5.5")
    rather than the exact binary expansion.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class LinePricer(OrderPricingPort):
    """unit_price * quantity * (1 - discount) + freight, in Decimal."""

    def price(self, order) -> Decimal:
        gross = to_decimal(order.unit_price) * (order.quantity or 0)
        discount = to_decimal(order.discount)
        # A zero discount must not widen the exponent of the result
        net = gross * (Decimal("1") - discount) if discount else gross
        freight = to_decimal(order.freight)
        return net + freight if freight else net
