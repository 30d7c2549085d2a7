import io

import pytest
import requests

from calorie_tracker.services import food_recognition_service
from calorie_tracker.services.food_recognition_service import FoodRecognitionService
from calorie_tracker.utils import get_nutrition_by_name


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


def make_service(token="hf_test"):
    return FoodRecognitionService(
        api_url="https://inference.example/models/detr", api_token=token, timeout=5, confidence=0.25
    )


def test_lookup_matches_substring_case_insensitive():
    result = get_nutrition_by_name("Ripe BANANA bunch")
    assert result == {"food_name": "banana", "calories": 105, "protein": 1.3, "carbs": 27, "fat": 0.4}


def test_lookup_unmatched_returns_average_values():
    result = get_nutrition_by_name("dining table")
    assert result == {"food_name": "dining table", "calories": 250, "protein": 15, "carbs": 30, "fat": 8}


def test_lookup_uses_table_order():
    # "egg" precedes "bread" in the table
    assert get_nutrition_by_name("egg bread sandwich")["food_name"] == "egg"


def test_missing_token_returns_placeholder_without_request(monkeypatch):
    def fail_post(*args, **kwargs):
        raise AssertionError("classifier must not be called without a token")

    monkeypatch.setattr(food_recognition_service.requests, "post", fail_post)

    result = make_service(token="").analyze(b"image")
    assert result == {
        "food_name": "Detected Food", "calories": 250, "protein": 15, "carbs": 30, "fat": 8,
        "source": "fallback"
    }


def test_classifier_label_is_looked_up(monkeypatch):
    calls = []

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append((url, headers, json, timeout))
        return FakeResponse([
            {"label": "bowl", "score": 0.61},
            {"label": "broccoli", "score": 0.93},
            {"label": "pizza", "score": 0.12},
        ])

    monkeypatch.setattr(food_recognition_service.requests, "post", fake_post)

    result = make_service().analyze(b"\x89PNG")

    assert result["food_name"] == "broccoli"
    assert result["calories"] == 55
    assert result["source"] == "classifier"

    url, headers, body, timeout = calls[0]
    assert url == "https://inference.example/models/detr"
    assert headers["Authorization"] == "Bearer hf_test"
    assert body == {"inputs": "iVBORw=="}
    assert timeout == 5


def test_unknown_label_gets_average_values(monkeypatch):
    monkeypatch.setattr(
        food_recognition_service.requests, "post",
        lambda *a, **kw: FakeResponse([{"label": "cup", "score": 0.9}])
    )

    result = make_service().analyze(b"img")
    assert result["food_name"] == "cup"
    assert (result["calories"], result["protein"], result["carbs"], result["fat"]) == (250, 15, 30, 8)


@pytest.mark.parametrize("response", [
    FakeResponse({"error": "Model is loading"}, status_code=503),
    FakeResponse(ValueError("not json")),
    FakeResponse([]),
    FakeResponse([{"label": "banana", "score": 0.1}]),
    FakeResponse({"unexpected": "shape"}),
    FakeResponse([{"label": "banana", "score": None}]),
    FakeResponse([{"label": "banana", "score": "high"}]),
    FakeResponse([{"label": "banana", "score": float("nan")}]),
])
def test_classifier_failures_fall_back(monkeypatch, response):
    monkeypatch.setattr(food_recognition_service.requests, "post", lambda *a, **kw: response)

    result = make_service().analyze(b"img")
    assert result["source"] == "fallback"
    assert result["food_name"] == "Detected Food"


def test_network_error_falls_back(monkeypatch):
    def raise_timeout(*args, **kwargs):
        raise requests.Timeout("timed out")

    monkeypatch.setattr(food_recognition_service.requests, "post", raise_timeout)

    assert make_service().analyze(b"img")["source"] == "fallback"


def test_recognition_endpoint(client, auth_headers, image_bytes):
    response = client.post(
        "/api/v1/food-recognition",
        data={"image": (io.BytesIO(image_bytes), "meal.png")},
        headers=auth_headers,
        content_type="multipart/form-data"
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["analysis"]["source"] == "fallback"
    assert body["metadata"]["image_size"] == {"width": 32, "height": 32}


def test_recognition_endpoint_rejects_non_image(client, auth_headers):
    response = client.post(
        "/api/v1/food-recognition",
        data={"image": (io.BytesIO(b"not an image"), "meal.png")},
        headers=auth_headers,
        content_type="multipart/form-data"
    )
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid image file."}


def test_recognition_endpoint_requires_image(client, auth_headers):
    response = client.post("/api/v1/food-recognition", headers=auth_headers)
    assert response.status_code == 400


def test_recognition_endpoint_requires_token(client):
    assert client.get("/api/v1/food-recognition").status_code == 401


def test_malformed_scores_are_skipped(monkeypatch):
    monkeypatch.setattr(
        food_recognition_service.requests, "post",
        lambda *a, **kw: FakeResponse([
            {"label": "pizza", "score": None},
            {"label": "rice", "score": "0.8"},
            {"label": "egg", "score": "high"},
        ])
    )

    result = make_service().analyze(b"img")
    assert result["food_name"] == "rice"
    assert result["source"] == "classifier"
