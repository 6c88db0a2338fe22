"""Review recording and running-average rating maintenance."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from src.models.review import Review, ReviewDraft, UserReview
from src.models.service import Service
from src.services.catalog.repository import CatalogRepository

logger = logging.getLogger(__name__)


def running_mean(average: float, count: int, value: float) -> float:
    """Fold ``value`` into a mean over ``count`` items, rounded to two decimals."""

    return round((average * count + value) / (count + 1), 2)


def _next_rating(service: Service, new_rating: int) -> float:
    # A list holding every review gives the exact mean; legacy aggregates
    # without their reviews attached fall back to the incremental update.
    if service.reviews == len(service.reviews_list):
        ratings = [review.rating for review in service.reviews_list] + [new_rating]
        return round(sum(ratings) / len(ratings), 2)
    return running_mean(service.rating, service.reviews, new_rating)


class ReviewAggregator:
    """Attaches reviews to services and keeps their ratings consistent."""

    def __init__(
        self,
        repository: CatalogRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._clock = clock or (lambda: datetime.now(UTC))

    def add_review(self, service_id: int, draft: ReviewDraft) -> Review | None:
        """Record a review, returning None when the service does not exist."""

        with self._repository.write_lock:
            service = self._repository.get_by_id(service_id)
            if service is None:
                logger.info("Review rejected, unknown service %s", service_id)
                return None

            review = Review(
                **draft.model_dump(),
                id=self._repository.next_review_id(),
                created_at=self._clock(),
            )
            self._repository.update(
                service_id,
                {
                    "rating": _next_rating(service, review.rating),
                    "reviews": service.reviews + 1,
                    "reviews_list": [review, *service.reviews_list],
                },
            )

        logger.info(
            "Recorded review %s for service %s",
            review.id,
            service_id,
            extra={"user_id": review.user_id, "rating": review.rating},
        )
        return review

    def list_by_service(self, service_id: int) -> list[Review]:
        """Reviews of a service, newest first; empty when the service is unknown."""

        service = self._repository.get_by_id(service_id)
        return list(service.reviews_list) if service else []

    def list_by_user(self, user_id: int) -> list[UserReview]:
        """Every review written by ``user_id``, tagged with its service."""

        found: list[UserReview] = []
        for service in self._repository.list_all():
            for review in service.reviews_list:
                if review.user_id == user_id:
                    found.append(
                        UserReview(
                            **review.model_dump(),
                            service_id=service.id,
                            service_title=service.title,
                        )
                    )
        return found
