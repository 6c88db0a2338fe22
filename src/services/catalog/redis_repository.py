"""Redis-backed catalog storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import RLock
from typing import Any

import redis
from redis.exceptions import RedisError

from src.models.service import Service, ServiceDraft
from src.services.catalog.errors import CatalogUnavailableError
from src.services.catalog.repository import (
    CatalogRepository,
    build_service,
    merge_service,
)

logger = logging.getLogger(__name__)


class RedisCatalogRepository(CatalogRepository):
    """Catalog persisted in Redis so listings survive restarts.

    Services are stored as JSON documents in a hash keyed by id, insertion
    order is kept in a list and ids come from ``INCR`` counters.
    """

    def __init__(
        self,
        client: redis.Redis,
        *,
        prefix: str = "catalog:",
    ) -> None:
        self._client = client
        self._prefix = prefix
        self._lock = RLock()

    def _key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    @property
    def _services_key(self) -> str:
        return self._key("services")

    @property
    def _order_key(self) -> str:
        return self._key("order")

    @property
    def write_lock(self) -> RLock:
        return self._lock

    def load_seed(self, seed: Iterable[Service]) -> None:
        """Populate an empty catalog; a catalog holding data is left alone."""

        services = list(seed)
        if not services:
            return
        try:
            if self._client.hlen(self._services_key):
                logger.info("Catalog already populated, skipping seed data")
                return
            pipe = self._client.pipeline()
            for service in services:
                pipe.hset(self._services_key, str(service.id), service.model_dump_json())
                pipe.rpush(self._order_key, str(service.id))
            pipe.set(
                self._key("service_seq"), max(s.id for s in services), nx=True
            )
            last_review_id = max(
                (r.id for s in services for r in s.reviews_list), default=0
            )
            pipe.set(self._key("review_seq"), last_review_id, nx=True)
            pipe.execute()
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc
        logger.info("Seeded Redis catalog with %d services", len(services))

    def _load(self, raw: Any) -> Service:
        return Service.model_validate_json(raw)

    def _save(self, service: Service) -> None:
        self._client.hset(self._services_key, str(service.id), service.model_dump_json())

    def insert(self, draft: ServiceDraft) -> Service:
        try:
            service_id = int(self._client.incr(self._key("service_seq")))
            service = build_service(service_id, draft)
            pipe = self._client.pipeline()
            pipe.hset(self._services_key, str(service_id), service.model_dump_json())
            pipe.rpush(self._order_key, str(service_id))
            pipe.execute()
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc

        logger.info(
            "Inserted service %s", service.id, extra={"provider_id": service.provider_id}
        )
        return service

    def get_by_id(self, service_id: int) -> Service | None:
        try:
            raw = self._client.hget(self._services_key, str(service_id))
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc
        if not raw:
            return None
        return self._load(raw)

    def update(self, service_id: int, fields: dict[str, Any]) -> Service | None:
        with self._lock:
            current = self.get_by_id(service_id)
            if current is None:
                return None
            updated = merge_service(current, fields)
            try:
                self._save(updated)
            except RedisError as exc:
                raise CatalogUnavailableError(str(exc)) from exc

        logger.debug("Updated service %s fields=%s", service_id, sorted(fields))
        return updated

    def delete(self, service_id: int) -> bool:
        try:
            pipe = self._client.pipeline()
            pipe.hdel(self._services_key, str(service_id))
            pipe.lrem(self._order_key, 0, str(service_id))
            removed, _ = pipe.execute()
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc

        if removed:
            logger.info("Deleted service %s", service_id)
        return bool(removed)

    def list_all(self) -> list[Service]:
        try:
            ids = self._client.lrange(self._order_key, 0, -1)
            if not ids:
                return []
            documents = self._client.hmget(self._services_key, ids)
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc
        return [self._load(raw) for raw in documents if raw]

    def next_review_id(self) -> int:
        try:
            return int(self._client.incr(self._key("review_seq")))
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc

    def count(self) -> int:
        try:
            return int(self._client.hlen(self._services_key))
        except RedisError as exc:
            raise CatalogUnavailableError(str(exc)) from exc

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except RedisError:
            return False

    def close(self) -> None:
        self._client.close()
