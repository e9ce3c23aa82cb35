"""Order pricing port — abstract interface for pricing an order.

Prices are always Decimal so totals over many orders stay exact.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class OrderPricingPort(ABC):
    """Abstract interface for order pricing adapters."""

    @abstractmethod
    def price(self, order) -> Decimal:
        """Return the amount charged for ``order``."""
        ...
