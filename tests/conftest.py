"""Pytest configuration and fixtures for the catalog service."""

import fakeredis
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.services.catalog.redis_repository import RedisCatalogRepository
from src.services.catalog.repository import InMemoryCatalogRepository
from src.services.catalog.seed import build_seed_catalog
from src.services.geo import StaticCityResolver


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def redis_client():
    """Provide a fake Redis client for each test."""
    client = fakeredis.FakeRedis(decode_responses=True)
    try:
        yield client
    finally:
        client.flushdb()
        client.close()


@pytest.fixture(params=["memory", "redis"])
def catalog(request):
    """A seeded catalog, once per storage backend."""
    if request.param == "redis":
        client = request.getfixturevalue("redis_client")
        repository = RedisCatalogRepository(client, prefix="test:")
        repository.load_seed(build_seed_catalog())
        return repository
    return InMemoryCatalogRepository(build_seed_catalog())


@pytest.fixture()
def memory_catalog():
    return InMemoryCatalogRepository(build_seed_catalog())


@pytest.fixture()
def empty_catalog():
    return InMemoryCatalogRepository()


@pytest.fixture()
def resolver():
    return StaticCityResolver()


@pytest.fixture()
def app(memory_catalog):
    """A fresh application owning its own catalog."""
    from src.application import create_app

    return create_app(catalog=memory_catalog)


@pytest_asyncio.fixture()
async def client(app):
    """Return an HTTPX async client pointing at the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
