"""Order pricing abstraction — pluggable pricing of customer orders."""

import os

_pricer_instance = None


def get_pricer():
    """Return the configured pricing adapter (singleton).

    Uses LinePricer by default. Select another adapter with the ORDER_PRICER
    environment variable.
    """
    global _pricer_instance
    if _pricer_instance is None:
        adapter = os.environ.get("ORDER_PRICER", "line")
        if adapter == "line":
            from productify.pricing.line_pricer import LinePricer

            _pricer_instance = LinePricer()
        else:
            raise ValueError(f"Unknown order pricer: {adapter}")
    return _pricer_instance


def reset_pricer():
    """Reset the pricer singleton (useful for testing)."""
    global _pricer_instance
    _pricer_instance = None
