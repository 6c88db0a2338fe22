"""Review models shared by the catalog and the reviews API."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReviewDraft(BaseModel):
    """Review content submitted by a customer."""

    user_id: int
    name: str
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""


class Review(ReviewDraft):
    """A review attached to a service."""

    id: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    avatar: str | None = None


class UserReview(Review):
    """Review tagged with the service it was written for."""

    service_id: int
    service_title: str


class ReviewCreate(BaseModel):
    """Request body for POST /reviews."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    service_id: int
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    user_id: int | None = Field(None, description="Defaults to the placeholder reviewer")
    name: str | None = Field(None, description="Defaults to the placeholder reviewer")


class ReviewResponse(BaseModel):
    review: Review


class ReviewListResponse(BaseModel):
    reviews: list[Review]


class UserReviewListResponse(BaseModel):
    reviews: list[UserReview]
