"""Service catalog domain models and API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.models.review import Review

ServiceCategory = Literal["home", "tech", "design", "business", "education", "other"]


class ProviderRef(BaseModel):
    """Denormalized copy of the provider that owns a listing."""

    id: int
    name: str
    avatar: str | None = None
    location: str | None = Field(
        None,
        description="Provider base location, used when the listing location is unknown",
    )


class ServiceDraft(BaseModel):
    """Fields supplied when a service is inserted into the catalog."""

    title: str = Field(..., min_length=1)
    description: str = ""
    category: ServiceCategory = "other"
    location: str = ""
    price: float = Field(0, ge=0)
    delivery_time: str = ""
    image: str | None = None
    features: list[str] = Field(default_factory=list)
    provider_id: int | None = None
    provider: ProviderRef | None = None


class Service(ServiceDraft):
    """A single offering held by the catalog."""

    id: int
    rating: float = Field(0, ge=0, le=5, description="Mean of all review ratings")
    reviews: int = Field(0, ge=0, description="Number of reviews received")
    views: int = Field(0, ge=0)
    reviews_list: list[Review] = Field(
        default_factory=list,
        description="Reviews ordered newest first",
    )


class ServiceCreate(BaseModel):
    """Request body for POST /provider/services."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str = ""
    category: ServiceCategory = "other"
    price: float = Field(0, ge=0)
    delivery_time: str = ""
    image: str | None = None
    features: list[str] = Field(default_factory=list)
    location: str | None = None
    city: str | None = Field(None, description="Takes precedence over location")


class ServiceUpdate(BaseModel):
    """Request body for PATCH /provider/services/{id}.

    Only fields present in the body are merged. ``image`` may be sent as
    ``null`` to clear it; the remaining fields cannot be cleared.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = Field(None, min_length=1)
    description: str | None = None
    category: ServiceCategory | None = None
    location: str | None = None
    price: float | None = Field(None, ge=0)
    delivery_time: str | None = None
    image: str | None = None
    features: list[str] | None = None

    @field_validator(
        "title",
        "description",
        "category",
        "location",
        "price",
        "delivery_time",
        "features",
    )
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be cleared")
        return value


class ServiceResponse(BaseModel):
    service: Service


class ServiceListResponse(BaseModel):
    services: list[Service]


class DeleteResponse(BaseModel):
    success: bool
    message: str


class ProviderStats(BaseModel):
    """Aggregate numbers shown on the provider dashboard."""

    total_services: int = Field(..., ge=0)
    total_reviews: int = Field(..., ge=0)
    total_views: int = Field(..., ge=0)
    average_rating: float = Field(..., ge=0, le=5)


class ProviderStatsResponse(BaseModel):
    stats: ProviderStats
