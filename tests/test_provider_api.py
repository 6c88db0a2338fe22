"""Tests for the provider listing management endpoints."""

from __future__ import annotations

import pytest

PROVIDER_HEADERS = {"X-Provider-Id": "4", "X-Provider-Name": "Creative Studio"}


def _payload(**overrides) -> dict:
    payload = {
        "title": "Wedding Photography",
        "description": "Full-day coverage with edited gallery",
        "category": "design",
        "price": 1200,
        "deliveryTime": "3 weeks",
        "features": ["Two photographers", "Online gallery"],
        "city": "Chicago, IL",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_list_provider_services(client):
    """Test that a provider only sees their own listings."""
    # Act
    response = await client.get("/provider/services", headers=PROVIDER_HEADERS)

    # Assert
    assert response.status_code == 200
    assert [s["id"] for s in response.json()["services"]] == [3]


@pytest.mark.asyncio
async def test_default_provider_starts_empty(client):
    """Test that the placeholder provider has no seeded listings."""
    # Act
    response = await client.get("/provider/services")

    # Assert
    assert response.json()["services"] == []


@pytest.mark.asyncio
async def test_create_service_injects_provider(client):
    """Test that a created listing carries the caller's identity and zero aggregates."""
    # Act
    response = await client.post(
        "/provider/services", json=_payload(), headers=PROVIDER_HEADERS
    )

    # Assert
    assert response.status_code == 201
    service = response.json()["service"]
    assert service["id"] == 7
    assert service["provider_id"] == 4
    assert service["provider"]["name"] == "Creative Studio"
    assert service["location"] == "Chicago, IL"
    assert service["delivery_time"] == "3 weeks"
    assert service["rating"] == 0
    assert service["reviews"] == 0
    assert service["reviews_list"] == []

    listing = await client.get("/provider/services", headers=PROVIDER_HEADERS)
    assert [s["id"] for s in listing.json()["services"]] == [3, 7]


@pytest.mark.asyncio
async def test_create_service_accepts_snake_case_fields(client):
    """Test that field names are also accepted in snake_case."""
    # Arrange
    payload = _payload()
    payload["delivery_time"] = payload.pop("deliveryTime")

    # Act
    response = await client.post("/provider/services", json=payload)

    # Assert
    assert response.status_code == 201
    assert response.json()["service"]["delivery_time"] == "3 weeks"


@pytest.mark.asyncio
async def test_create_service_location_fallbacks(client):
    """Test that city wins over location and "Unknown" is the last resort."""
    # Act
    with_location = await client.post(
        "/provider/services", json=_payload(city=None, location="Boston, MA")
    )
    without_any = await client.post("/provider/services", json=_payload(city=None))

    # Assert
    assert with_location.json()["service"]["location"] == "Boston, MA"
    assert with_location.json()["service"]["provider"]["name"] == "Current Provider"
    assert without_any.json()["service"]["location"] == "Unknown"


@pytest.mark.asyncio
async def test_create_service_rejects_negative_price(client):
    """Test that a negative price fails validation."""
    # Act
    response = await client.post("/provider/services", json=_payload(price=-5))

    # Assert
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_provider_service(client):
    """Test fetching an existing and a missing listing."""
    # Act
    found = await client.get("/provider/services/2")
    missing = await client.get("/provider/services/999")

    # Assert
    assert found.json()["service"]["title"] == "Home Cleaning Service"
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_patch_service_merges_fields(client):
    """Test that PATCH only changes the fields it was sent."""
    # Arrange
    payload = {"price": 180, "deliveryTime": "Next day", "features": ["Pet friendly"]}

    # Act
    response = await client.patch("/provider/services/2", json=payload)

    # Assert
    assert response.status_code == 200
    service = response.json()["service"]
    assert service["price"] == 180
    assert service["delivery_time"] == "Next day"
    assert service["features"] == ["Pet friendly"]
    assert service["title"] == "Home Cleaning Service"
    assert service["rating"] == 4.5


@pytest.mark.asyncio
async def test_patch_service_clears_image(client):
    """Test that sending a null image removes it."""
    # Act
    response = await client.patch("/provider/services/1", json={"image": None})

    # Assert
    assert response.status_code == 200
    assert response.json()["service"]["image"] is None
    assert response.json()["service"]["title"] == "Professional Web Development"


@pytest.mark.asyncio
async def test_patch_service_rejects_null_required_field(client):
    """Test that required fields cannot be cleared with null."""
    # Act
    response = await client.patch("/provider/services/1", json={"title": None})

    # Assert
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_patch_missing_service(client, memory_catalog):
    """Test that patching a missing listing is a 404 and changes nothing."""
    # Act
    response = await client.patch("/provider/services/999", json={"title": "Ghost"})

    # Assert
    assert response.status_code == 404
    assert memory_catalog.count() == 6


@pytest.mark.asyncio
async def test_delete_service(client):
    """Test that deleting twice succeeds once and then reports 404."""
    # Act
    first = await client.delete("/provider/services/5")
    second = await client.delete("/provider/services/5")

    # Assert
    assert first.status_code == 200
    assert first.json() == {"success": True, "message": "Service deleted"}
    assert second.status_code == 404
    assert (await client.get("/services/5")).status_code == 404


@pytest.mark.asyncio
async def test_provider_stats(client):
    """Test the dashboard numbers for a seeded provider."""
    # Act
    response = await client.get("/provider/stats", headers={"X-Provider-Id": "2"})

    # Assert
    assert response.status_code == 200
    assert response.json()["stats"] == {
        "total_services": 1,
        "total_reviews": 3,
        "total_views": 342,
        "average_rating": 4.67,
    }
