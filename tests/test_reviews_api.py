"""Tests for the reviews endpoints."""

from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_post_review_updates_service_rating(client):
    """Test that a submitted review is prepended and folded into the rating."""
    # Arrange
    payload = {
        "serviceId": 2,
        "rating": 3,
        "comment": "Decent",
        "userId": 55,
        "name": "Ana",
    }

    # Act
    response = await client.post("/reviews", json=payload)

    # Assert
    assert response.status_code == 201
    review = response.json()["review"]
    assert review["rating"] == 3
    assert review["user_id"] == 55
    assert review["name"] == "Ana"

    service = (await client.get("/services/2")).json()["service"]
    assert service["reviews"] == 3
    assert service["rating"] == 4.0
    assert service["reviews_list"][0]["id"] == review["id"]


@pytest.mark.asyncio
async def test_post_review_accepts_snake_case_fields(client):
    """Test that field names are also accepted in snake_case."""
    # Arrange
    payload = {"service_id": 4, "rating": 4, "user_id": 8}

    # Act
    response = await client.post("/reviews", json=payload)

    # Assert
    assert response.status_code == 201
    assert response.json()["review"]["user_id"] == 8


@pytest.mark.asyncio
async def test_post_review_uses_placeholder_reviewer(client):
    """Test that the reviewer defaults to the placeholder identity."""
    # Arrange
    payload = {"serviceId": 4, "rating": 5}

    # Act
    response = await client.post("/reviews", json=payload)

    # Assert
    review = response.json()["review"]
    assert review["user_id"] == 1
    assert review["name"] == "You"


@pytest.mark.asyncio
async def test_post_review_for_unknown_service(client):
    """Test that reviewing a missing service returns 404."""
    # Arrange
    payload = {"serviceId": 999, "rating": 4}

    # Act
    response = await client.post("/reviews", json=payload)

    # Assert
    assert response.status_code == 404
    assert response.json()["detail"] == "Service not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6])
async def test_post_review_rejects_out_of_range_rating(client, rating):
    """Test that ratings outside 1-5 are rejected."""
    # Arrange
    payload = {"serviceId": 1, "rating": rating}

    # Act
    response = await client.post("/reviews", json=payload)

    # Assert
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_reviews_by_service(client):
    """Test that reviews for a service come back newest first."""
    # Act
    response = await client.get("/reviews", params={"serviceId": "1"})

    # Assert
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["reviews"]] == [1, 2, 3]


@pytest.mark.asyncio
async def test_get_reviews_by_user(client):
    """Test that a user's reviews are tagged with the owning service."""
    # Arrange
    await client.post("/reviews", json={"serviceId": 6, "rating": 4, "userId": 101})

    # Act
    response = await client.get("/reviews", params={"userId": "101"})

    # Assert
    reviews = response.json()["reviews"]
    assert [r["service_id"] for r in reviews] == [1, 2, 6]
    assert reviews[-1]["service_title"] == "Mobile App Development"


@pytest.mark.asyncio
async def test_get_reviews_without_filters_is_empty(client):
    """Test that a query without serviceId or userId returns an empty list."""
    # Act
    response = await client.get("/reviews")

    # Assert
    assert response.status_code == 200
    assert response.json() == {"reviews": []}


@pytest.mark.asyncio
async def test_get_reviews_for_unknown_service_is_empty(client):
    """Test that an unknown service has no reviews rather than a 404."""
    # Act
    response = await client.get("/reviews", params={"serviceId": "999"})

    # Assert
    assert response.json() == {"reviews": []}
