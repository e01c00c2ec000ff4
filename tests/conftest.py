"""
Shared fixtures: a small Paris/London -> New York inventory in memory.
"""

from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from flightdb.config import create_session_factory, init_db
from flightfinder.models.records import Airline, Airport, Flight, Route
from flightfinder.repositories import InMemoryFlightRepository


SEARCH_DAY = date(2024, 12, 25)

AIR_FRANCE = Airline(id=1, code="AF", name="Air France", logo_url="https://example.com/af.png")
BRITISH_AIRWAYS = Airline(id=2, code="BA", name="British Airways")
DELTA = Airline(id=3, code="DL", name="Delta Air Lines")

CDG = Airport(id=1, code="CDG", name="Charles de Gaulle Airport", city="Paris",
              country="France", latitude=49.0097, longitude=2.5479)
ORY = Airport(id=2, code="ORY", name="Orly Airport", city="Paris",
              country="France", latitude=48.7262, longitude=2.3652)
JFK = Airport(id=3, code="JFK", name="John F. Kennedy International Airport", city="New York",
              country="United States", latitude=40.6413, longitude=-73.7781)
LHR = Airport(id=4, code="LHR", name="Heathrow Airport", city="London",
              country="United Kingdom", latitude=51.4700, longitude=-0.4543)


def make_flight(
    id: int,
    departure: datetime,
    arrival: datetime = None,
    airline: Airline = AIR_FRANCE,
    origin: Airport = CDG,
    destination: Airport = JFK,
    price: float = 599.99,
    seats: int = 150,
    stops: int = 0,
    duration: int = 375,
    currency: str = "EUR",
) -> Flight:
    """Build a flight record; arrival defaults to departure + 8h"""
    if arrival is None:
        arrival = departure + timedelta(hours=8)
    return Flight(
        id=id,
        airline_id=airline.id,
        flight_number=f"{airline.code}{id:03d}",
        origin_airport_id=origin.id,
        destination_airport_id=destination.id,
        departure_time=departure,
        arrival_time=arrival,
        price=price,
        available_seats=seats,
        stops=stops,
        duration_minutes=duration,
        currency=currency,
    )


def at(hour: int, minute: int = 0, day: date = SEARCH_DAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


@pytest.fixture
def base_repository() -> InMemoryFlightRepository:
    """Reference data only, no flights"""
    return InMemoryFlightRepository(
        airlines=[AIR_FRANCE, BRITISH_AIRWAYS, DELTA],
        airports=[CDG, ORY, JFK, LHR],
    )


@pytest.fixture
def paris_flights():
    """Paris -> New York flights on the search day, in id order"""
    return [
        make_flight(1, at(10, 30), at(16, 45), price=599.99, duration=375),
        make_flight(2, at(8, 0), at(16, 15), airline=DELTA, origin=ORY, price=299.99, duration=495, stops=1),
        make_flight(3, at(22, 15), at(23, 55), price=799.99, duration=495, seats=4),
        make_flight(4, at(14, 0), at(20, 30), airline=BRITISH_AIRWAYS, price=450.00, duration=390, stops=2),
    ]


@pytest.fixture
def repository(base_repository, paris_flights) -> InMemoryFlightRepository:
    """
    Inventory with the Paris flights plus noise that the base constraints
    must exclude: another day, another route, wrong direction.
    """
    for flight in paris_flights:
        base_repository.add_flight(flight)
    base_repository.add_flight(make_flight(10, at(10, 30, day=date(2024, 12, 26)), at(16, 45, day=date(2024, 12, 26))))
    base_repository.add_flight(make_flight(11, at(9, 0), at(17, 0), airline=BRITISH_AIRWAYS, origin=LHR))
    base_repository.add_flight(make_flight(12, at(12, 0), at(20, 0), origin=JFK, destination=CDG))
    base_repository.add_flight(make_flight(13, at(23, 59, day=date(2024, 12, 24)), at(23, 59)))
    return base_repository


@pytest.fixture
def route_repository(base_repository) -> InMemoryFlightRepository:
    """Route aggregates with a tie on flight_count"""
    updated = datetime(2024, 12, 1, 6, 0)
    base_repository.add_route(Route(id=1, origin_airport_id=CDG.id, destination_airport_id=LHR.id,
                                    min_price=89.0, max_price=450.0, flight_count=12, last_updated=updated))
    base_repository.add_route(Route(id=2, origin_airport_id=CDG.id, destination_airport_id=JFK.id,
                                    min_price=320.0, max_price=1200.0, flight_count=8, last_updated=updated))
    base_repository.add_route(Route(id=3, origin_airport_id=LHR.id, destination_airport_id=JFK.id,
                                    min_price=290.0, max_price=1100.0, flight_count=15, last_updated=updated))
    base_repository.add_route(Route(id=4, origin_airport_id=JFK.id, destination_airport_id=CDG.id,
                                    min_price=340.0, max_price=1150.0, flight_count=8, last_updated=updated))
    return base_repository


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared across sessions, with tables created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    return create_session_factory(sqlite_engine)
