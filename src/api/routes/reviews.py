"""Routes for submitting and reading service reviews."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.api.dependencies import ReviewAggregatorDependency
from src.api.params import coerce_int
from src.config import settings
from src.models.review import (
    ReviewCreate,
    ReviewDraft,
    ReviewListResponse,
    ReviewResponse,
    UserReviewListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get(
    "",
    response_model=None,
    summary="List reviews for a service or written by a user",
)
def list_reviews(
    aggregator: ReviewAggregatorDependency,
    service_id: Annotated[str | None, Query(alias="serviceId")] = None,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
) -> ReviewListResponse | UserReviewListResponse:
    """``serviceId`` takes precedence; without either the list is empty."""

    parsed_service_id = coerce_int(service_id)
    if parsed_service_id is not None:
        return ReviewListResponse(reviews=aggregator.list_by_service(parsed_service_id))

    parsed_user_id = coerce_int(user_id)
    if parsed_user_id is not None:
        return UserReviewListResponse(reviews=aggregator.list_by_user(parsed_user_id))

    return ReviewListResponse(reviews=[])


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review for a service",
)
def create_review(
    payload: ReviewCreate,
    aggregator: ReviewAggregatorDependency,
) -> ReviewResponse:
    draft = ReviewDraft(
        user_id=(
            payload.user_id
            if payload.user_id is not None
            else settings.DEFAULT_REVIEWER_ID
        ),
        name=payload.name or settings.DEFAULT_REVIEWER_NAME,
        rating=payload.rating,
        comment=payload.comment,
    )
    review = aggregator.add_review(payload.service_id, draft)
    if review is None:
        logger.warning("Review submitted for unknown service %s", payload.service_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Service not found"
        )
    return ReviewResponse(review=review)
