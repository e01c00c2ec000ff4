"""
Flight repository interface.

The search core depends only on this protocol. Implementations build typed
records from their storage and raise RepositoryError when a query fails.
"""

from typing import List, Protocol, runtime_checkable

from ..core.parsing import DateWindow
from ..models.records import Airline, Airport, FlightRow, RouteRow


@runtime_checkable
class FlightRepository(Protocol):
    """
    Read-only access to flights, routes and their reference data.

    All implementations must be safe to call from concurrent searches.
    """

    def query_flights(
        self,
        origin_city: str,
        destination_city: str,
        window: DateWindow,
        min_seats: int
    ) -> List[FlightRow]:
        """
        Fetch flights between two cities departing inside a window.

        Args:
            origin_city: Exact city name of the origin airport
            destination_city: Exact city name of the destination airport
            window: Half-open departure window [start, end)
            min_seats: Minimum number of available seats

        Returns:
            (flight, airline, origin airport, destination airport) tuples
        """
        ...

    def query_routes_with_airports(self) -> List[RouteRow]:
        """Fetch every route aggregate with both endpoint airports"""
        ...

    def list_airlines(self) -> List[Airline]:
        ...

    def list_airports(self) -> List[Airport]:
        ...

    def airports_by_city(self, city: str) -> List[Airport]:
        ...
