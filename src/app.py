"""Productify FastAPI application.

Processes customer commands synchronously via HTTP. Every request runs
inside the productify domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from productify.domain import productify
from productify.utils.logging import add_context, clear_context

# PROTEAN_ENV selects the config overlay from domain.toml
productify.init()


def create_app() -> FastAPI:
    """Build the API with domain-context middleware and Protean error mapping."""
    from productify.api import router

    application = FastAPI(
        title="Productify API",
        description="Customer registration, validation and order history",
    )

    @application.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        add_context(method=request.method, path=request.url.path)
        try:
            with productify.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    application.include_router(router)
    register_exception_handlers(application)

    @application.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": productify.name})

    return application


app = create_app()
