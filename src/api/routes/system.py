"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.api.dependencies import CatalogDependency
from src.config import settings

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Banner endpoint used by smoke tests."""

    return {"message": "Service Catalog API"}


@router.get("/health")
def health_check(catalog: CatalogDependency) -> dict[str, str | int]:
    """Health check endpoint reporting catalog backend connectivity."""

    if not catalog.ping():
        return {
            "status": "degraded",
            "catalog": "disconnected",
            "backend": settings.CATALOG_BACKEND,
            "environment": settings.ENVIRONMENT,
        }

    return {
        "status": "healthy",
        "catalog": "connected",
        "backend": settings.CATALOG_BACKEND,
        "services": catalog.count(),
        "environment": settings.ENVIRONMENT,
    }
