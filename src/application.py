"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import redis
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import include_api_routes
from src.config import settings
from src.services.catalog.errors import CatalogUnavailableError
from src.services.catalog.redis_repository import RedisCatalogRepository
from src.services.catalog.repository import CatalogRepository, InMemoryCatalogRepository
from src.services.catalog.seed import build_seed_catalog
from src.services.geo import StaticCityResolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    catalog: CatalogRepository = app.state.catalog
    try:
        if isinstance(catalog, RedisCatalogRepository) and settings.SEED_CATALOG:
            catalog.load_seed(build_seed_catalog())
        logger.info(
            "Catalog ready (backend=%s, services=%d)",
            settings.CATALOG_BACKEND,
            catalog.count(),
        )
    except CatalogUnavailableError as exc:
        # Keep serving so /health can report the outage
        logger.warning("Catalog backend unreachable at startup: %s", exc)

    yield

    try:
        catalog.close()
    except Exception:
        logger.exception("Failed closing catalog backend on shutdown")


def build_catalog() -> CatalogRepository:
    """Construct the catalog backend selected by configuration.

    No connection is opened here; a Redis catalog is seeded by ``lifespan``.
    """

    if settings.uses_redis:
        client = redis.Redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
        )
        return RedisCatalogRepository(client, prefix=settings.CATALOG_KEY_PREFIX)
    return InMemoryCatalogRepository(
        build_seed_catalog() if settings.SEED_CATALOG else []
    )


def create_app(catalog: CatalogRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Service Catalog API",
        description="Services marketplace catalog, search and reviews",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.catalog = catalog if catalog is not None else build_catalog()
    app.state.location_resolver = StaticCityResolver()

    _configure_cors(app)
    _register_error_handlers(app)
    include_api_routes(app)

    return app


def _configure_cors(app: FastAPI) -> None:
    """Allow broad access in non-production environments."""

    if settings.is_production:
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_error_handlers(app: FastAPI) -> None:
    """Translate backend outages into 503 responses."""

    @app.exception_handler(CatalogUnavailableError)
    async def catalog_unavailable_handler(
        request: Request, exc: CatalogUnavailableError
    ) -> JSONResponse:
        logger.error("Catalog backend unavailable on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Service catalog is temporarily unavailable"},
        )
