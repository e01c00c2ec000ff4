"""
Tests for SqlFlightRepository against an in-memory SQLite database
"""

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from flightdb.config import create_session_factory
from flightdb.ingestion.seed import seed_database
from flightfinder.core.exceptions import RepositoryError
from flightfinder.core.parsing import day_window
from flightfinder.repositories import FlightRepository, SqlFlightRepository
from flightfinder.services import FlightSearchService, PopularRouteService


REFERENCE_DAY = date(2024, 12, 24)
FLIGHT_DAY = date(2024, 12, 25)


@pytest.fixture
def sql_repository(session_factory) -> SqlFlightRepository:
    seed_database(session_factory, reference_day=REFERENCE_DAY)
    return SqlFlightRepository(session_factory)


def flight_numbers(rows):
    return [flight.flight_number for flight, _, _, _ in rows]


class TestQueryFlights:
    def test_city_to_city(self, sql_repository):
        rows = sql_repository.query_flights("Paris", "New York", day_window(FLIGHT_DAY), 1)
        assert flight_numbers(rows) == ["AF007", "AF009"]

    def test_joined_records(self, sql_repository):
        flight, airline, origin, destination = sql_repository.query_flights(
            "Paris", "New York", day_window(FLIGHT_DAY), 1
        )[0]
        assert flight.departure_time == datetime(2024, 12, 25, 10, 30)
        assert flight.price == 650.0
        assert isinstance(flight.price, float)
        assert flight.duration_minutes == 495
        assert airline.name == "Air France"
        assert origin.code == "CDG"
        assert destination.city == "New York"

    def test_min_seats(self, sql_repository):
        rows = sql_repository.query_flights("Paris", "New York", day_window(FLIGHT_DAY), 30)
        assert flight_numbers(rows) == ["AF007"]

    def test_other_day(self, sql_repository):
        assert sql_repository.query_flights("Paris", "New York", day_window(REFERENCE_DAY), 1) == []

    def test_next_day_arrival_stays_on_departure_day(self, sql_repository):
        # SQ231 departs day 2 at 21:30 and lands on day 3
        rows = sql_repository.query_flights("Singapore", "Sydney", day_window(date(2024, 12, 26)), 1)
        assert flight_numbers(rows) == ["SQ231"]
        assert sql_repository.query_flights("Singapore", "Sydney", day_window(date(2024, 12, 27)), 1) == []

    def test_satisfies_protocol(self, sql_repository):
        assert isinstance(sql_repository, FlightRepository)


class TestReferenceQueries:
    def test_routes_with_airports(self, sql_repository):
        rows = sql_repository.query_routes_with_airports()
        assert len(rows) == 26
        route, origin, destination = rows[0]
        assert (origin.code, destination.code) == ("CDG", "LHR")
        assert route.min_price == 89.0
        assert route.flight_count == 12

    def test_airlines(self, sql_repository):
        airlines = sql_repository.list_airlines()
        assert len(airlines) == 8
        assert airlines[0].code == "AF"

    def test_airports(self, sql_repository):
        assert len(sql_repository.list_airports()) == 19
        assert [airport.code for airport in sql_repository.airports_by_city("Tokyo")] == ["NRT"]


class TestServicesOverSql:
    def test_search(self, sql_repository):
        results = FlightSearchService(sql_repository).search({
            "origin_city": "Paris",
            "destination_city": "New York",
            "departure_date": "2024-12-25",
            "passengers": 2,
        })
        assert [row.flight_number for row in results] == ["AF009", "AF007"]
        assert [row.price for row in results] == [580.0, 650.0]

    def test_popular_routes(self, sql_repository):
        routes = PopularRouteService(sql_repository).list_popular_routes()
        assert (routes[0].origin_airport_code, routes[0].destination_airport_code) == ("JFK", "LAX")
        assert routes[0].flight_count == 15


class TestErrors:
    def test_missing_tables_raise_repository_error(self):
        engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
        repository = SqlFlightRepository(create_session_factory(engine))
        try:
            with pytest.raises(RepositoryError):
                repository.query_flights("Paris", "New York", day_window(FLIGHT_DAY), 1)
            with pytest.raises(RepositoryError):
                repository.query_routes_with_airports()
        finally:
            engine.dispose()
