"""Dependency factories shared by the API routers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request

from src.config import settings
from src.models.service import ProviderRef
from src.services.catalog.query import ServiceQueryEngine
from src.services.catalog.repository import CatalogRepository
from src.services.catalog.reviews import ReviewAggregator
from src.services.geo import LocationResolver


def get_catalog_repository(request: Request) -> CatalogRepository:
    """Return the catalog owned by the running application."""

    return request.app.state.catalog


def get_location_resolver(request: Request) -> LocationResolver:
    return request.app.state.location_resolver


CatalogDependency = Annotated[CatalogRepository, Depends(get_catalog_repository)]
ResolverDependency = Annotated[LocationResolver, Depends(get_location_resolver)]


def get_query_engine(
    catalog: CatalogDependency,
    resolver: ResolverDependency,
) -> ServiceQueryEngine:
    return ServiceQueryEngine(
        catalog,
        resolver,
        default_radius_km=settings.DEFAULT_RADIUS_KM,
    )


def get_review_aggregator(catalog: CatalogDependency) -> ReviewAggregator:
    return ReviewAggregator(catalog)


def get_current_provider(
    x_provider_id: Annotated[int | None, Header()] = None,
    x_provider_name: Annotated[str | None, Header()] = None,
) -> ProviderRef:
    """Mock authentication: identify the provider from request headers."""

    return ProviderRef(
        id=x_provider_id if x_provider_id is not None else settings.DEFAULT_PROVIDER_ID,
        name=x_provider_name or settings.DEFAULT_PROVIDER_NAME,
    )


QueryEngineDependency = Annotated[ServiceQueryEngine, Depends(get_query_engine)]
ReviewAggregatorDependency = Annotated[ReviewAggregator, Depends(get_review_aggregator)]
CurrentProviderDependency = Annotated[ProviderRef, Depends(get_current_provider)]
