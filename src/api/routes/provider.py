"""Routes a provider uses to manage their own listings."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from src.api.dependencies import (
    CatalogDependency,
    CurrentProviderDependency,
    QueryEngineDependency,
)
from src.models.query import ServiceFilter
from src.models.service import (
    DeleteResponse,
    ProviderStatsResponse,
    ServiceCreate,
    ServiceDraft,
    ServiceListResponse,
    ServiceResponse,
    ServiceUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/provider", tags=["provider"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")


@router.get(
    "/services",
    response_model=ServiceListResponse,
    summary="List the current provider's services",
)
def list_provider_services(
    engine: QueryEngineDependency,
    provider: CurrentProviderDependency,
) -> ServiceListResponse:
    services = engine.search(ServiceFilter(provider_id=provider.id))
    return ServiceListResponse(services=services)


@router.post(
    "/services",
    response_model=ServiceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a service listing",
)
def create_service(
    payload: ServiceCreate,
    catalog: CatalogDependency,
    provider: CurrentProviderDependency,
) -> ServiceResponse:
    """Insert a listing owned by the calling provider."""

    fields = payload.model_dump(exclude={"location", "city"})
    draft = ServiceDraft(
        **fields,
        location=payload.city or payload.location or "Unknown",
        provider_id=provider.id,
        provider=provider,
    )
    service = catalog.insert(draft)
    logger.info(
        "Provider %s created service %s", provider.id, service.id,
        extra={"category": service.category},
    )
    return ServiceResponse(service=service)


@router.get(
    "/services/{service_id}",
    response_model=ServiceResponse,
    summary="Fetch one of the provider's services",
)
def get_provider_service(
    service_id: int, catalog: CatalogDependency
) -> ServiceResponse:
    service = catalog.get_by_id(service_id)
    if service is None:
        raise _not_found()
    return ServiceResponse(service=service)


@router.patch(
    "/services/{service_id}",
    response_model=ServiceResponse,
    summary="Partially update a service",
)
def update_service(
    service_id: int,
    payload: ServiceUpdate,
    catalog: CatalogDependency,
) -> ServiceResponse:
    """Merge the supplied fields; omitted fields keep their values."""

    fields = payload.model_dump(exclude_unset=True)
    service = catalog.update(service_id, fields)
    if service is None:
        raise _not_found()
    return ServiceResponse(service=service)


@router.delete(
    "/services/{service_id}",
    response_model=DeleteResponse,
    summary="Delete a service",
)
def delete_service(service_id: int, catalog: CatalogDependency) -> DeleteResponse:
    if not catalog.delete(service_id):
        raise _not_found()
    return DeleteResponse(success=True, message="Service deleted")


@router.get(
    "/stats",
    response_model=ProviderStatsResponse,
    summary="Aggregate numbers for the provider dashboard",
)
def provider_stats(
    engine: QueryEngineDependency,
    provider: CurrentProviderDependency,
) -> ProviderStatsResponse:
    return ProviderStatsResponse(stats=engine.provider_stats(provider.id))
