"""Validation rule-sets — named, swappable rule configuration for customers.

Rule-sets are looked up by name when the caller does not inject one. The
registry starts out with the default configuration from
``productify.validation.defaults``.
"""

from productify.shared.errors import RuleSetNotFoundError
from productify.validation.port import CAN_MAKE_ORDERS, IS_VALID_FOR_REGISTRATION, RuleSetPort
from productify.validation.result import ValidationResult, Violation
from productify.validation.rule_set import Rule, RuleSet

__all__ = [
    "CAN_MAKE_ORDERS",
    "IS_VALID_FOR_REGISTRATION",
    "Rule",
    "RuleSet",
    "RuleSetPort",
    "ValidationResult",
    "Violation",
    "get_rule_set",
    "register_rule_set",
    "reset_rule_sets",
]

_rule_sets: dict[str, RuleSetPort] | None = None


def _registry() -> dict[str, RuleSetPort]:
    global _rule_sets
    if _rule_sets is None:
        from productify.validation.defaults import default_rule_sets

        _rule_sets = {rule_set.name: rule_set for rule_set in default_rule_sets()}
    return _rule_sets


def get_rule_set(name: str) -> RuleSetPort:
    """Return the rule-set registered under ``name``.

    Raises RuleSetNotFoundError when nothing is registered under that name.
    """
    try:
        return _registry()[name]
    except KeyError:
        raise RuleSetNotFoundError(name) from None


def register_rule_set(rule_set: RuleSetPort) -> None:
    """Register ``rule_set`` under its name, replacing any previous one."""
    _registry()[rule_set.name] = rule_set


def unregister_rule_set(name: str) -> None:
    _registry().pop(name, None)


def reset_rule_sets() -> None:
    """Drop all registrations and restore the defaults on next lookup (useful for testing)."""
    global _rule_sets
    _rule_sets = None
