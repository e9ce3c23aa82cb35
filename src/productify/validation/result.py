"""Outcome of evaluating a rule-set."""

from dataclasses import dataclass, field

from protean.exceptions import ValidationError


@dataclass(frozen=True)
class Violation:
    """A single rule that did not hold."""

    rule: str
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    rule_set: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> dict[str, list[str]]:
        """Violations grouped by field, in the shape Protean's ValidationError uses."""
        grouped: dict[str, list[str]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.field, []).append(violation.message)
        return grouped

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise ValidationError(self.messages)
