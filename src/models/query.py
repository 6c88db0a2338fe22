"""Criteria used to query the service catalog."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

ALL_CATEGORIES = "all"


class SortKey(str, Enum):
    """Orderings supported by catalog listings."""

    RATING = "rating-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    POPULARITY = "popularity-desc"

    @classmethod
    def parse(cls, value: str | None) -> SortKey:
        """Map a wire or canonical name to a key, defaulting to popularity."""

        if not value:
            return cls.POPULARITY
        if value in _WIRE_NAMES:
            return _WIRE_NAMES[value]
        try:
            return cls(value)
        except ValueError:
            return cls.POPULARITY


_WIRE_NAMES = {
    "rating": SortKey.RATING,
    "price-low": SortKey.PRICE_ASC,
    "price-high": SortKey.PRICE_DESC,
    "popular": SortKey.POPULARITY,
}


class ServiceFilter(BaseModel):
    """Criteria narrowing and ordering a catalog query.

    Every criterion is optional; an absent criterion is simply not applied.
    """

    category: str | None = Field(
        None,
        description=f"Exact category match; '{ALL_CATEGORIES}' disables the filter",
    )
    provider_id: int | None = None
    location_city: str | None = Field(
        None,
        description="Case-insensitive substring of the service location",
    )
    search: str | None = Field(
        None,
        description="Case-insensitive substring of the title or description",
    )
    lat: float | None = None
    lon: float | None = None
    radius_km: float | None = None
    sort_by: SortKey = SortKey.POPULARITY
