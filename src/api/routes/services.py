"""Public catalog browsing routes."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import CatalogDependency, QueryEngineDependency
from src.api.params import coerce_float, first_present
from src.models.query import ServiceFilter, SortKey
from src.models.service import ServiceListResponse, ServiceResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["services"])

OptionalQuery = Annotated[str | None, Query()]


@router.get(
    "",
    response_model=ServiceListResponse,
    summary="Browse the service catalog",
)
def list_services(
    engine: QueryEngineDependency,
    category: OptionalQuery = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    location: OptionalQuery = None,
    city: OptionalQuery = None,
    q: OptionalQuery = None,
    lat: OptionalQuery = None,
    lon: OptionalQuery = None,
    radius_km: Annotated[str | None, Query(alias="radiusKm")] = None,
    radius: OptionalQuery = None,
) -> ServiceListResponse:
    """Filter by category, location text or geo radius and sort the result."""

    criteria = ServiceFilter(
        category=category,
        location_city=first_present(location, city),
        search=q,
        lat=coerce_float(lat),
        lon=coerce_float(lon),
        radius_km=coerce_float(first_present(radius_km, radius)),
        sort_by=SortKey.parse(sort_by),
    )
    services = engine.search(criteria)
    return ServiceListResponse(services=services)


@router.get(
    "/{service_id}",
    response_model=ServiceResponse,
    summary="Fetch a single service",
)
def get_service(service_id: int, catalog: CatalogDependency) -> ServiceResponse:
    service = catalog.get_by_id(service_id)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
        )
    return ServiceResponse(service=service)
