"""Default rule configuration for customers.

Registration rules cover the fields a customer needs before it can be saved;
ordering rules add what is needed on top of that to accept orders.
"""

import re

from productify.validation.port import CAN_MAKE_ORDERS, IS_VALID_FOR_REGISTRATION
from productify.validation.rule_set import Rule, RuleSet

MAX_ID_LENGTH = 10
MAX_COMPANY_NAME_LENGTH = 40
MAX_CONTACT_NAME_LENGTH = 30
MAX_PHONE_LENGTH = 24

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-().]+$")


def _present(value) -> bool:
    return value is not None and bool(str(value).strip())


def _within(value, limit) -> bool:
    return value is None or len(value) <= limit


def _valid_phone(value) -> bool:
    """Empty is acceptable; otherwise digits, spaces, hyphens, dots, parentheses, optional leading +."""
    if not _present(value):
        return True
    return len(value) <= MAX_PHONE_LENGTH and bool(re.search(r"\d", value)) and bool(_PHONE_PATTERN.match(value))


def _contact_name(customer):
    return customer.contact_info.contact_name if customer.contact_info else None


def registration_rules() -> RuleSet:
    return RuleSet(
        IS_VALID_FOR_REGISTRATION,
        [
            Rule("id_required", "id", "Customer id is required", lambda c: _present(c.id)),
            Rule(
                "id_length",
                "id",
                f"Customer id cannot exceed {MAX_ID_LENGTH} characters",
                lambda c: _within(c.id, MAX_ID_LENGTH),
            ),
            Rule("company_name_required", "name", "Company name is required", lambda c: _present(c.name)),
            Rule(
                "company_name_length",
                "name",
                f"Company name cannot exceed {MAX_COMPANY_NAME_LENGTH} characters",
                lambda c: _within(c.name, MAX_COMPANY_NAME_LENGTH),
            ),
            Rule(
                "contact_name_required",
                "contact_name",
                "Contact name is required",
                lambda c: _present(_contact_name(c)),
            ),
            Rule(
                "contact_name_length",
                "contact_name",
                f"Contact name cannot exceed {MAX_CONTACT_NAME_LENGTH} characters",
                lambda c: _within(_contact_name(c), MAX_CONTACT_NAME_LENGTH),
            ),
            Rule("phone_number_format", "phone_number", "Invalid phone number", lambda c: _valid_phone(c.phone_number)),
            Rule("fax_number_format", "fax_number", "Invalid fax number", lambda c: _valid_phone(c.fax_number)),
        ],
    )


def ordering_rules() -> RuleSet:
    return RuleSet(
        CAN_MAKE_ORDERS,
        [
            Rule(
                "phone_number_on_file",
                "phone_number",
                "A phone number is required to place orders",
                lambda c: _present(c.phone_number),
            ),
        ],
    )


def default_rule_sets() -> list[RuleSet]:
    return [registration_rules(), ordering_rules()]
