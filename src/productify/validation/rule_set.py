"""Configurable rule-set built from named predicates."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from productify.validation.port import RuleSetPort
from productify.validation.result import ValidationResult, Violation


@dataclass(frozen=True)
class Rule:
    """A predicate over the instance; ``message`` is reported when it returns False."""

    name: str
    field: str
    message: str
    predicate: Callable[[object], bool]


class RuleSet(RuleSetPort):
    """Evaluates all of its rules, collecting every violation."""

    def __init__(self, name: str, rules: Iterable[Rule] = ()):
        self.name = name
        self.rules = tuple(rules)

    def evaluate(self, instance) -> ValidationResult:
        violations = tuple(
            Violation(rule=rule.name, field=rule.field, message=rule.message)
            for rule in self.rules
            if not rule.predicate(instance)
        )
        return ValidationResult(rule_set=self.name, violations=violations)

    def extended(self, *rules: Rule) -> "RuleSet":
        """A copy of this rule-set with ``rules`` appended."""
        return RuleSet(self.name, self.rules + rules)

    def __repr__(self):
        return f"RuleSet({self.name!r}, rules={[rule.name for rule in self.rules]})"
