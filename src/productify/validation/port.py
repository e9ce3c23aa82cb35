"""Rule-set port — abstract interface for customer validation rule-sets.

The Customer aggregate programs against this port. Which rules a rule-set
holds is configuration, kept out of the aggregate.
"""

from abc import ABC, abstractmethod

from productify.validation.result import ValidationResult

IS_VALID_FOR_REGISTRATION = "IsValidForRegistration"
CAN_MAKE_ORDERS = "CanMakeOrders"


class RuleSetPort(ABC):
    """Abstract interface for a named rule-set."""

    name: str

    @abstractmethod
    def evaluate(self, instance) -> ValidationResult:
        """Evaluate every rule against ``instance``.

        Must not mutate ``instance``; evaluating twice yields the same result.
        """
        ...
