"""Catalog storage interface and the in-memory implementation."""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager
from threading import RLock
from typing import Any

from src.models.service import Service, ServiceDraft

logger = logging.getLogger(__name__)

_AGGREGATE_DEFAULTS: dict[str, Any] = {
    "rating": 0,
    "reviews": 0,
    "views": 0,
    "reviews_list": [],
}


def build_service(service_id: int, draft: ServiceDraft) -> Service:
    """Create a fresh catalog record with zero-valued aggregates."""

    return Service(**draft.model_dump(), id=service_id, **_AGGREGATE_DEFAULTS)


def merge_service(current: Service, fields: dict[str, Any]) -> Service:
    """Shallow-merge ``fields`` into ``current``; the id is never overwritten."""

    changes = {key: value for key, value in fields.items() if key != "id"}
    return Service.model_validate({**dict(current), **changes})


class CatalogRepository(ABC):
    """Storage contract shared by every catalog backend."""

    @property
    @abstractmethod
    def write_lock(self) -> AbstractContextManager:
        """Lock held across read-modify-write sequences."""

    @abstractmethod
    def insert(self, draft: ServiceDraft) -> Service:
        """Store a new service and return it with its assigned id."""

    @abstractmethod
    def get_by_id(self, service_id: int) -> Service | None:
        """Return the service or None when it does not exist."""

    @abstractmethod
    def update(self, service_id: int, fields: dict[str, Any]) -> Service | None:
        """Merge ``fields`` into a stored service, None when it does not exist."""

    @abstractmethod
    def delete(self, service_id: int) -> bool:
        """Remove a service, returning whether anything was removed."""

    @abstractmethod
    def list_all(self) -> list[Service]:
        """Return every service in insertion order."""

    @abstractmethod
    def next_review_id(self) -> int:
        """Return a review id never handed out before by this catalog."""

    def count(self) -> int:
        return len(self.list_all())

    def ping(self) -> bool:
        """Report whether the backend is reachable."""
        return True

    def close(self) -> None:
        """Release backend resources."""


class InMemoryCatalogRepository(CatalogRepository):
    """Process-local catalog; contents reset whenever the process restarts."""

    def __init__(self, seed: Iterable[Service] = ()) -> None:
        self._lock = RLock()
        self._storage: dict[int, Service] = {}
        for service in seed:
            self._storage[service.id] = service.model_copy(deep=True)

        last_service_id = max(self._storage, default=0)
        last_review_id = max(
            (review.id for s in self._storage.values() for review in s.reviews_list),
            default=0,
        )
        self._service_ids = itertools.count(last_service_id + 1)
        self._review_ids = itertools.count(last_review_id + 1)

    @property
    def write_lock(self) -> RLock:
        return self._lock

    def insert(self, draft: ServiceDraft) -> Service:
        with self._lock:
            service = build_service(next(self._service_ids), draft)
            self._storage[service.id] = service

        logger.info(
            "Inserted service %s", service.id, extra={"provider_id": service.provider_id}
        )
        return service.model_copy(deep=True)

    def get_by_id(self, service_id: int) -> Service | None:
        with self._lock:
            service = self._storage.get(service_id)
            return service.model_copy(deep=True) if service else None

    def update(self, service_id: int, fields: dict[str, Any]) -> Service | None:
        with self._lock:
            current = self._storage.get(service_id)
            if current is None:
                return None
            updated = merge_service(current, fields)
            self._storage[service_id] = updated

        logger.debug("Updated service %s fields=%s", service_id, sorted(fields))
        return updated.model_copy(deep=True)

    def delete(self, service_id: int) -> bool:
        with self._lock:
            removed = self._storage.pop(service_id, None)

        if removed is not None:
            logger.info("Deleted service %s", service_id)
        return removed is not None

    def list_all(self) -> list[Service]:
        with self._lock:
            return [service.model_copy(deep=True) for service in self._storage.values()]

    def next_review_id(self) -> int:
        with self._lock:
            return next(self._review_ids)

    def count(self) -> int:
        with self._lock:
            return len(self._storage)
