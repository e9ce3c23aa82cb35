"""Errors raised by the productify domain.

Argument errors extend Protean's ValidationError so callers handling domain
validation failures catch them too; `messages` keeps Protean's
``{field: [message, ...]}`` shape.
"""

from protean.exceptions import ValidationError


class InvalidArgumentError(ValidationError):
    """A required argument was missing (None)."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__({argument: [message or f"{argument} is required"]})


class EmptyValueError(InvalidArgumentError):
    """A required string argument was empty or whitespace-only."""

    def __init__(self, argument: str, message: str | None = None):
        super().__init__(argument, message or f"{argument} cannot be empty")


class RuleSetNotFoundError(LookupError):
    """No validation rule-set is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No rule-set registered under {name!r}")


def require_text(argument: str, value) -> str:
    """Return ``value`` unchanged, or raise when it is None or blank."""
    if value is None:
        raise InvalidArgumentError(argument)
    if not str(value).strip():
        raise EmptyValueError(argument)
    return value
