"""
SQLAlchemy-backed flight repository
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from flightdb import models as db
from ..core.exceptions import RepositoryError
from ..core.parsing import DateWindow
from ..models.records import Airline, Airport, Flight, Route, FlightRow, RouteRow

logger = logging.getLogger(__name__)


def to_airline(row: db.Airline) -> Airline:
    return Airline(id=row.id, code=row.code, name=row.name, logo_url=row.logo_url)


def to_airport(row: db.Airport) -> Airport:
    return Airport(
        id=row.id,
        code=row.code,
        name=row.name,
        city=row.city,
        country=row.country,
        latitude=float(row.latitude),
        longitude=float(row.longitude)
    )


def to_flight(row: db.Flight) -> Flight:
    return Flight(
        id=row.id,
        airline_id=row.airline_id,
        flight_number=row.flight_number,
        origin_airport_id=row.origin_airport_id,
        destination_airport_id=row.destination_airport_id,
        departure_time=row.departure_time,
        arrival_time=row.arrival_time,
        price=float(row.price),
        currency=row.currency,
        available_seats=row.available_seats,
        stops=row.stops,
        duration_minutes=row.duration_minutes
    )


def to_route(row: db.Route) -> Route:
    return Route(
        id=row.id,
        origin_airport_id=row.origin_airport_id,
        destination_airport_id=row.destination_airport_id,
        min_price=float(row.min_price),
        max_price=float(row.max_price),
        flight_count=row.flight_count,
        last_updated=row.last_updated
    )


class SqlFlightRepository:
    """
    Flight repository on top of a SQLAlchemy session factory.

    A fresh session is opened for every call and closed afterwards, so one
    instance can serve concurrent searches.
    """
    
    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory
    
    def query_flights(
        self,
        origin_city: str,
        destination_city: str,
        window: DateWindow,
        min_seats: int
    ) -> List[FlightRow]:
        """
        Fetch flights matching the base search constraints.

        Only the route, departure window and seat constraints are applied
        here; optional filters are evaluated by the search service.
        """
        Origin = aliased(db.Airport)
        Destination = aliased(db.Airport)
        
        with self._session("query_flights") as session:
            rows = (
                session.query(db.Flight, db.Airline, Origin, Destination)
                .join(db.Airline, db.Flight.airline_id == db.Airline.id)
                .join(Origin, db.Flight.origin_airport_id == Origin.id)
                .join(Destination, db.Flight.destination_airport_id == Destination.id)
                .filter(
                    Origin.city == origin_city,
                    Destination.city == destination_city,
                    db.Flight.departure_time >= window.start,
                    db.Flight.departure_time < window.end,
                    db.Flight.available_seats >= min_seats
                )
                .order_by(db.Flight.id)
                .all()
            )
            return [
                (to_flight(flight), to_airline(airline), to_airport(origin), to_airport(destination))
                for flight, airline, origin, destination in rows
            ]
    
    def query_routes_with_airports(self) -> List[RouteRow]:
        Origin = aliased(db.Airport)
        Destination = aliased(db.Airport)
        
        with self._session("query_routes_with_airports") as session:
            rows = (
                session.query(db.Route, Origin, Destination)
                .join(Origin, db.Route.origin_airport_id == Origin.id)
                .join(Destination, db.Route.destination_airport_id == Destination.id)
                .order_by(db.Route.id)
                .all()
            )
            return [
                (to_route(route), to_airport(origin), to_airport(destination))
                for route, origin, destination in rows
            ]
    
    def list_airlines(self) -> List[Airline]:
        with self._session("list_airlines") as session:
            rows = session.query(db.Airline).order_by(db.Airline.id).all()
            return [to_airline(row) for row in rows]
    
    def list_airports(self) -> List[Airport]:
        with self._session("list_airports") as session:
            rows = session.query(db.Airport).order_by(db.Airport.id).all()
            return [to_airport(row) for row in rows]
    
    def airports_by_city(self, city: str) -> List[Airport]:
        with self._session("airports_by_city") as session:
            rows = (
                session.query(db.Airport)
                .filter(db.Airport.city == city)
                .order_by(db.Airport.id)
                .all()
            )
            return [to_airport(row) for row in rows]
    
    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        """
        Open a session for one operation, translating SQLAlchemy failures
        into RepositoryError
        """
        session = None
        try:
            session = self.session_factory()
            yield session
        except SQLAlchemyError as e:
            logger.error(f"Repository query {operation} failed: {e}")
            raise RepositoryError(f"{operation} failed: {e}") from e
        finally:
            if session is not None:
                session.close()
