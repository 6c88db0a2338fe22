"""Location resolution and great-circle distance helpers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import NamedTuple

EARTH_RADIUS_KM = 6371.0


class GeoPoint(NamedTuple):
    """Latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


CITY_COORDINATES: dict[str, GeoPoint] = {
    "New York, NY": GeoPoint(40.7128, -74.006),
    "Los Angeles, CA": GeoPoint(34.0522, -118.2437),
    "Chicago, IL": GeoPoint(41.8781, -87.6298),
    "Boston, MA": GeoPoint(42.3601, -71.0589),
    "Austin, TX": GeoPoint(30.2672, -97.7431),
    "San Francisco, CA": GeoPoint(37.7749, -122.4194),
}


class LocationResolver(ABC):
    """Abstract geocoder turning a location name into coordinates."""

    @abstractmethod
    def resolve_city(self, name: str | None) -> GeoPoint | None:
        """Return the coordinates for ``name`` or None when unknown."""


class StaticCityResolver(LocationResolver):
    """Resolver backed by a fixed city -> coordinates table."""

    def __init__(self, table: Mapping[str, GeoPoint] | None = None) -> None:
        self._table = dict(CITY_COORDINATES if table is None else table)

    def resolve_city(self, name: str | None) -> GeoPoint | None:
        if not name:
            return None
        return self._table.get(name)


def _is_number(value: float | None) -> bool:
    return isinstance(value, int | float) and math.isfinite(value)


def resolve_point(
    resolver: LocationResolver,
    *,
    lat: float | None = None,
    lon: float | None = None,
    city: str | None = None,
) -> GeoPoint | None:
    """Resolve an explicit coordinate pair, falling back to a city lookup."""

    if _is_number(lat) and _is_number(lon):
        return GeoPoint(float(lat), float(lon))
    return resolver.resolve_city(city)


def distance_km(a: GeoPoint | None, b: GeoPoint | None) -> float:
    """Haversine distance between two points; infinite if either is unknown."""

    if a is None or b is None:
        return math.inf
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lon - a.lon)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c
