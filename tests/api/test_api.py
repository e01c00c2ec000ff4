"""
Tests for the HTTP API, run against the in-memory repository
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from flightfinder.core.database import get_repository
from flightfinder.core.exceptions import RepositoryError, ValidationError
from flightfinder.main import app
from flightfinder.services import FlightSearchService


SEARCH_BODY = {
    "origin_city": "Paris",
    "destination_city": "New York",
    "departure_date": "2024-12-25",
    "passengers": 2,
}


@pytest.fixture
def client_for():
    def build(repository) -> TestClient:
        app.dependency_overrides[get_repository] = lambda: repository
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_for, repository) -> TestClient:
    return client_for(repository)


class TestRoot:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/v1/search/health"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_search_health(self, client):
        response = client.get("/v1/search/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSearchEndpoint:
    def test_search(self, client):
        response = client.post("/v1/search", json=SEARCH_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["origin_city"] == "Paris"
        assert data["departure_date"] == "2024-12-25"
        assert [row["id"] for row in data["results"]] == [2, 4, 1, 3]
        assert data["meta"] == {"returned": 4, "sort": "price_asc"}
        assert data["search_id"]

    def test_filters_and_sort(self, client):
        body = dict(SEARCH_BODY, sort="departure_time_desc", filters={"airlines": ["AF"]})
        data = client.post("/v1/search", json=body).json()
        assert [row["id"] for row in data["results"]] == [3, 1]
        assert data["meta"]["sort"] == "departure_time_desc"

    def test_unknown_sort_reports_fallback(self, client):
        body = dict(SEARCH_BODY, sort="cheapest")
        data = client.post("/v1/search", json=body).json()
        assert data["meta"]["sort"] == "price_asc"

    def test_empty_result_is_success(self, client):
        body = dict(SEARCH_BODY, destination_city="Tokyo")
        response = client.post("/v1/search", json=body)
        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["meta"]["returned"] == 0

    def test_result_row_shape(self, client):
        body = dict(SEARCH_BODY, filters={"max_price": 300})
        row = client.post("/v1/search", json=body).json()["results"][0]
        assert row["airline_code"] == "DL"
        assert row["origin_airport_code"] == "ORY"
        assert row["price"] == 299.99
        assert row["stops"] == 1
        assert row["departure_time"] == "2024-12-25T08:00:00"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"passengers": 0},
            {"passengers": 10},
            {"departure_date": "2024-13-01"},
            {"filters": {"departure_time_range": {"start": "25:00", "end": "23:00"}}},
            {"return_date": "2024-12-20"},
        ],
    )
    def test_malformed_body(self, client, overrides):
        response = client.post("/v1/search", json=dict(SEARCH_BODY, **overrides))
        assert response.status_code == 422

    def test_documented_error_responses(self, client):
        responses = client.get("/openapi.json").json()["paths"]["/v1/search"]["post"]["responses"]
        assert responses["422"]["description"] == "Malformed request body"
        assert "outside request body parsing" in responses["400"]["description"]
        assert "500" in responses

    def test_validation_error_is_400(self, client, monkeypatch):
        def reject(self, request):
            raise ValidationError("Invalid time of day '25:00', expected HH:MM", "departure_time_range.start")

        monkeypatch.setattr(FlightSearchService, "search_with_meta", reject)
        response = client.post("/v1/search", json=SEARCH_BODY)

        assert response.status_code == 400
        assert response.json() == {
            "error": "VALIDATION_ERROR",
            "message": "Invalid time of day '25:00', expected HH:MM",
            "details": {"field": "departure_time_range.start"},
        }

    def test_repository_error_is_500(self, client_for):
        repository = MagicMock()
        repository.query_flights.side_effect = RepositoryError("database is locked")
        client = client_for(repository)

        response = client.post("/v1/search", json=SEARCH_BODY)

        assert response.status_code == 500
        assert response.json()["error"] == "REPOSITORY_ERROR"


class TestRoutesEndpoint:
    def test_popular_routes(self, client_for, route_repository):
        response = client_for(route_repository).get("/v1/routes/popular")

        assert response.status_code == 200
        routes = response.json()
        assert [route["id"] for route in routes] == [3, 1, 2, 4]
        assert routes[0]["origin_airport_code"] == "LHR"
        assert routes[0]["min_price"] == 290.0

    def test_no_routes(self, client_for, base_repository):
        assert client_for(base_repository).get("/v1/routes/popular").json() == []


class TestReferenceEndpoints:
    def test_airlines(self, client):
        airlines = client.get("/v1/airlines").json()
        assert [airline["code"] for airline in airlines] == ["AF", "BA", "DL"]

    def test_airports(self, client):
        airports = client.get("/v1/airports").json()
        assert len(airports) == 4

    def test_airports_by_city(self, client):
        airports = client.get("/v1/airports", params={"city": "Paris"}).json()
        assert [airport["code"] for airport in airports] == ["CDG", "ORY"]
