"""
Typed records handed out by flight repositories.

Repositories build these from whatever storage they use; the search core
only ever sees these immutable values, never raw rows.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Airline:
    """Airline reference data"""

    id: int
    code: str
    name: str
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class Airport:
    """Airport reference data. Coordinates are only used for map display."""

    id: int
    code: str
    name: str
    city: str
    country: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Flight:
    """
    A single scheduled flight.

    `duration_minutes` is stored as ingested and is not recomputed from the
    departure and arrival timestamps, so the two may disagree.
    """

    id: int
    airline_id: int
    flight_number: str
    origin_airport_id: int
    destination_airport_id: int
    departure_time: datetime
    arrival_time: datetime
    price: float
    available_seats: int
    duration_minutes: int
    stops: int = 0
    currency: str = "EUR"

    def __post_init__(self) -> None:
        if self.origin_airport_id == self.destination_airport_id:
            raise ValueError(
                f"Flight {self.flight_number}: origin and destination must differ"
            )
        if self.departure_time.tzinfo is not None or self.arrival_time.tzinfo is not None:
            raise ValueError(
                f"Flight {self.flight_number}: times must be naive local clock times"
            )
        if self.arrival_time <= self.departure_time:
            raise ValueError(
                f"Flight {self.flight_number}: arrival must be after departure"
            )
        if self.price <= 0:
            raise ValueError(f"Flight {self.flight_number}: price must be positive")
        if self.available_seats < 0:
            raise ValueError(f"Flight {self.flight_number}: available_seats must be >= 0")
        if self.stops < 0:
            raise ValueError(f"Flight {self.flight_number}: stops must be >= 0")


@dataclass(frozen=True)
class Route:
    """
    Aggregated statistics for one origin/destination pair.

    Maintained out of band by the route stats refresh job.
    """

    id: int
    origin_airport_id: int
    destination_airport_id: int
    min_price: float
    max_price: float
    flight_count: int
    last_updated: datetime

    def __post_init__(self) -> None:
        if self.min_price > self.max_price:
            raise ValueError(
                f"Route {self.id}: min_price ({self.min_price}) must be <= max_price ({self.max_price})"
            )
        if self.flight_count < 0:
            raise ValueError(f"Route {self.id}: flight_count must be >= 0")


# (flight, airline, origin airport, destination airport)
FlightRow = Tuple[Flight, Airline, Airport, Airport]

# (route, origin airport, destination airport)
RouteRow = Tuple[Route, Airport, Airport]
