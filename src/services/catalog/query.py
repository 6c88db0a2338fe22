"""Filter, geo-radius and sort pipeline over the service catalog."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from src.models.query import ALL_CATEGORIES, ServiceFilter, SortKey
from src.models.service import ProviderStats, Service
from src.services.catalog.repository import CatalogRepository
from src.services.geo import GeoPoint, LocationResolver, distance_km, resolve_point

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_KM = 25.0

# (key, descending)
_SORT_ORDERS: dict[SortKey, tuple[Callable[[Service], float], bool]] = {
    SortKey.RATING: (lambda s: s.rating, True),
    SortKey.PRICE_ASC: (lambda s: s.price, False),
    SortKey.PRICE_DESC: (lambda s: s.price, True),
    SortKey.POPULARITY: (lambda s: s.reviews, True),
}


def sort_services(services: Sequence[Service], sort_by: SortKey) -> list[Service]:
    """Stable sort by the requested key."""

    key, descending = _SORT_ORDERS[sort_by]
    return sorted(services, key=key, reverse=descending)


class ServiceQueryEngine:
    """Answers catalog listing queries."""

    def __init__(
        self,
        repository: CatalogRepository,
        resolver: LocationResolver,
        *,
        default_radius_km: float = DEFAULT_RADIUS_KM,
    ) -> None:
        self._repository = repository
        self._resolver = resolver
        self._default_radius_km = default_radius_km

    def search(self, criteria: ServiceFilter) -> list[Service]:
        """Return the services matching ``criteria`` in the requested order."""

        services = self._repository.list_all()

        if criteria.category and criteria.category != ALL_CATEGORIES:
            services = [s for s in services if s.category == criteria.category]

        if criteria.provider_id is not None:
            services = [s for s in services if s.provider_id == criteria.provider_id]

        if criteria.location_city:
            needle = criteria.location_city.lower()
            services = [s for s in services if needle in (s.location or "").lower()]

        if criteria.search:
            needle = criteria.search.strip().lower()
            services = [
                s
                for s in services
                if needle in s.title.lower() or needle in (s.description or "").lower()
            ]

        origin = resolve_point(
            self._resolver,
            lat=criteria.lat,
            lon=criteria.lon,
            city=criteria.location_city,
        )
        if origin is not None:
            radius = criteria.radius_km or self._default_radius_km
            services = [
                s for s in services if distance_km(origin, self._locate(s)) <= radius
            ]

        ordered = sort_services(services, criteria.sort_by)
        logger.debug(
            "Catalog query matched %d services",
            len(ordered),
            extra={"sort_by": criteria.sort_by.value, "geo": origin is not None},
        )
        return ordered

    def _locate(self, service: Service) -> GeoPoint | None:
        point = self._resolver.resolve_city(service.location)
        if point is None and service.provider is not None:
            point = self._resolver.resolve_city(service.provider.location)
        return point

    def provider_stats(self, provider_id: int) -> ProviderStats:
        """Summarise a provider's listings for their dashboard."""

        services = self.search(ServiceFilter(provider_id=provider_id))
        rated = [s.rating for s in services if s.reviews > 0]
        average = round(sum(rated) / len(rated), 2) if rated else 0.0
        return ProviderStats(
            total_services=len(services),
            total_reviews=sum(s.reviews for s in services),
            total_views=sum(s.views for s in services),
            average_rating=average,
        )
