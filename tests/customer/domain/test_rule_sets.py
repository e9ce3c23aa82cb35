"""Tests for rule-sets, validation results and the default rule configuration."""

import pytest
from protean.exceptions import ValidationError

from productify.customer.customer import Customer
from productify.shared.errors import RuleSetNotFoundError
from productify.validation import (
    CAN_MAKE_ORDERS,
    IS_VALID_FOR_REGISTRATION,
    Rule,
    RuleSet,
    ValidationResult,
    Violation,
    get_rule_set,
    register_rule_set,
    reset_rule_sets,
)
from productify.validation.defaults import MAX_COMPANY_NAME_LENGTH


class TestValidationResult:
    def test_without_violations_is_valid(self):
        result = ValidationResult(rule_set="Any")
        assert result.is_valid
        assert result.messages == {}
        result.raise_if_invalid()

    def test_groups_messages_by_field(self):
        result = ValidationResult(
            rule_set="Any",
            violations=(
                Violation(rule="a", field="name", message="too long"),
                Violation(rule="b", field="name", message="reserved"),
                Violation(rule="c", field="id", message="missing"),
            ),
        )
        assert result.messages == {"name": ["too long", "reserved"], "id": ["missing"]}

    def test_raise_if_invalid(self):
        result = ValidationResult(rule_set="Any", violations=(Violation(rule="a", field="id", message="missing"),))
        with pytest.raises(ValidationError) as exc:
            result.raise_if_invalid()
        assert exc.value.messages == {"id": ["missing"]}


class TestRuleSet:
    def test_collects_every_violation(self):
        rules = RuleSet(
            "Sample",
            [
                Rule("never", "a", "a failed", lambda _: False),
                Rule("always", "b", "b failed", lambda _: True),
                Rule("never_again", "c", "c failed", lambda _: False),
            ],
        )
        result = rules.evaluate(object())
        assert [v.rule for v in result.violations] == ["never", "never_again"]
        assert result.rule_set == "Sample"

    def test_empty_rule_set_passes(self):
        assert RuleSet("Empty").evaluate(object()).is_valid

    def test_extended_leaves_original_untouched(self):
        base = RuleSet("Sample", [Rule("always", "a", "a failed", lambda _: True)])
        extended = base.extended(Rule("never", "b", "b failed", lambda _: False))
        assert base.evaluate(object()).is_valid
        assert not extended.evaluate(object()).is_valid
        assert extended.name == "Sample"


class TestRegistry:
    def test_defaults_are_registered(self):
        assert get_rule_set(IS_VALID_FOR_REGISTRATION).name == IS_VALID_FOR_REGISTRATION
        assert get_rule_set(CAN_MAKE_ORDERS).name == CAN_MAKE_ORDERS

    def test_unknown_name_raises(self):
        with pytest.raises(RuleSetNotFoundError):
            get_rule_set("IsValidForAudit")

    def test_register_replaces_and_reset_restores(self):
        replacement = RuleSet(IS_VALID_FOR_REGISTRATION)
        register_rule_set(replacement)
        assert get_rule_set(IS_VALID_FOR_REGISTRATION) is replacement

        reset_rule_sets()
        assert get_rule_set(IS_VALID_FOR_REGISTRATION) is not replacement


class TestDefaultRegistrationRules:
    def _customer(self, **overrides):
        values = {"id": "ALFKI", "company_name": "Alfreds Futterkiste", "contact_name": "Maria Anders"}
        values.update(overrides)
        return Customer.create_new_customer(**values)

    def _failed_rules(self, customer):
        return {v.rule for v in customer.validate_for_registration().violations}

    def test_company_name_too_long(self):
        customer = self._customer(company_name="X" * (MAX_COMPANY_NAME_LENGTH + 1))
        assert self._failed_rules(customer) == {"company_name_length"}

    def test_company_name_at_limit(self):
        customer = self._customer(company_name="X" * MAX_COMPANY_NAME_LENGTH)
        assert customer.is_valid_for_registration

    def test_id_too_long(self):
        assert self._failed_rules(self._customer(id="ALFREDSFUTTER")) == {"id_length"}

    @pytest.mark.parametrize("phone", ["030-0074321", "(5) 555-4729", "+44 171 555-7788", "0241.39.21.23"])
    def test_accepted_phone_formats(self, phone):
        customer = self._customer()
        customer.update_contact_details(phone_number=phone, fax_number=phone)
        assert customer.is_valid_for_registration

    @pytest.mark.parametrize("phone", ["no phone", "---", "555-1234 ext. 7"])
    def test_rejected_phone_formats(self, phone):
        customer = self._customer()
        customer.update_contact_details(phone_number=phone)
        assert self._failed_rules(customer) == {"phone_number_format"}

    def test_rejected_fax_format(self):
        customer = self._customer()
        customer.update_contact_details(fax_number="fax me")
        assert self._failed_rules(customer) == {"fax_number_format"}


class TestDefaultOrderingRules:
    def test_requires_phone_number(self, alfreds):
        result = alfreds.validate_for_ordering()
        assert result.messages == {"phone_number": ["A phone number is required to place orders"]}

    def test_blank_phone_number_does_not_count(self, alfreds):
        alfreds.update_contact_details(phone_number="   ")
        assert not alfreds.validate_for_ordering().is_valid
