"""
In-memory flight repository for tests, demos and local development
"""

from typing import Dict, Iterable, List, Optional

from ..core.parsing import DateWindow
from ..models.records import Airline, Airport, Flight, Route, FlightRow, RouteRow


class InMemoryFlightRepository:
    """
    Flight repository over plain lists of records.

    Records are returned in insertion order, mirroring the id ordering of
    the SQL repository.
    """
    
    def __init__(
        self,
        airlines: Iterable[Airline] = (),
        airports: Iterable[Airport] = (),
        flights: Iterable[Flight] = (),
        routes: Iterable[Route] = ()
    ):
        self.airlines: Dict[int, Airline] = {}
        self.airports: Dict[int, Airport] = {}
        self.flights: List[Flight] = []
        self.routes: List[Route] = []
        
        for airline in airlines:
            self.add_airline(airline)
        for airport in airports:
            self.add_airport(airport)
        for flight in flights:
            self.add_flight(flight)
        for route in routes:
            self.add_route(route)
    
    def add_airline(self, airline: Airline) -> Airline:
        self.airlines[airline.id] = airline
        return airline
    
    def add_airport(self, airport: Airport) -> Airport:
        self.airports[airport.id] = airport
        return airport
    
    def add_flight(self, flight: Flight) -> Flight:
        """Add a flight; its airline and airports must already be known"""
        self._require(self.airlines, flight.airline_id, "airline")
        self._require(self.airports, flight.origin_airport_id, "airport")
        self._require(self.airports, flight.destination_airport_id, "airport")
        self.flights.append(flight)
        return flight
    
    def add_route(self, route: Route) -> Route:
        self._require(self.airports, route.origin_airport_id, "airport")
        self._require(self.airports, route.destination_airport_id, "airport")
        self.routes.append(route)
        return route
    
    def query_flights(
        self,
        origin_city: str,
        destination_city: str,
        window: DateWindow,
        min_seats: int
    ) -> List[FlightRow]:
        rows = []
        for flight in self.flights:
            origin = self.airports[flight.origin_airport_id]
            destination = self.airports[flight.destination_airport_id]
            if origin.city != origin_city or destination.city != destination_city:
                continue
            if not window.contains(flight.departure_time):
                continue
            if flight.available_seats < min_seats:
                continue
            rows.append((flight, self.airlines[flight.airline_id], origin, destination))
        return rows
    
    def query_routes_with_airports(self) -> List[RouteRow]:
        return [
            (route, self.airports[route.origin_airport_id], self.airports[route.destination_airport_id])
            for route in self.routes
        ]
    
    def list_airlines(self) -> List[Airline]:
        return list(self.airlines.values())
    
    def list_airports(self) -> List[Airport]:
        return list(self.airports.values())
    
    def airports_by_city(self, city: str) -> List[Airport]:
        return [airport for airport in self.airports.values() if airport.city == city]
    
    @staticmethod
    def _require(index: Dict[int, object], key: Optional[int], kind: str) -> None:
        if key not in index:
            raise KeyError(f"Unknown {kind} id {key}")
