"""Customer API package."""

from productify.api.routes import router

__all__ = ["router"]
