"""Domain initialization and configuration."""

from protean.domain import Domain

from productify.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
productify = Domain(name="productify")
