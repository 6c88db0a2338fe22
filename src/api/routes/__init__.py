"""API route registration."""

from fastapi import FastAPI

from src.api.routes import provider, reviews, services, system


def include_api_routes(app: FastAPI) -> None:
    """Attach all API routers to the application."""

    app.include_router(system.router)
    app.include_router(services.router)
    app.include_router(provider.router)
    app.include_router(reviews.router)
