"""HTTP surface coverage through FastAPI's test client."""

import pytest
from fastapi.testclient import TestClient

from server.api import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def test_healthcheck(client: TestClient) -> None:
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["service"] == "outfit-engine"


def test_recommendations_endpoint(client: TestClient) -> None:
    payload = {
        "items": [
            {"id": "t1", "category": "top", "name": "Tee", "color": "white", "style": "casual"},
            {"id": "b1", "category": "bottom", "name": "Jeans", "color": "blue", "style": "casual"},
            {"id": "s1", "category": "shoes", "name": "Sneakers", "color": "white", "style": "casual"},
        ],
        "context": {"weather": {"temperature": 21, "condition": "sunny"}, "occasion": "casual"},
        "limit": 3,
    }

    response = client.post("/recommendations", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert [r["id"] for r in body["recommendations"]] == ["outfit-b1-s1-t1"]


def test_recommendations_rejects_bad_limit(client: TestClient) -> None:
    response = client.post("/recommendations", json={"items": [], "limit": 500})
    assert response.status_code == 422


def test_weather_score_endpoint(client: TestClient) -> None:
    payload = {
        "items": [{"id": "c", "category": "outerwear", "material": "wool"}],
        "weather": {"temperature": -5, "condition": "snowy"},
    }

    response = client.post("/weather/score", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["score"]["band"] == "freezing"
    assert 0 <= body["score"]["overall"] <= 1
    assert body["guidance"]["layering_strategy"] == "Base Layer System"
    assert body["guidance"]["avoided_item_ids"] == []


def test_weather_sample_endpoint(client: TestClient) -> None:
    response = client.post("/weather/sample", json={"location": "phoenix", "season": "summer"})

    assert response.status_code == 200
    assert response.json()["region"] == "desert"


def test_weather_sample_rejects_unknown_season(client: TestClient) -> None:
    response = client.post("/weather/sample", json={"season": "monsoon"})
    assert response.status_code == 422
