"""
Popular routes - route statistics for map display
"""
from typing import List

from ..models import PopularRoute
from ..repositories.base import FlightRepository
from .search import create_popular_route


class PopularRouteService:
    """
    Lists stored route aggregates, busiest first.

    The aggregates are read as stored; keeping them fresh is the job of the
    route stats refresh (flightdb.update_route_stats).
    """
    
    def __init__(self, repository: FlightRepository):
        self.repository = repository
    
    def list_popular_routes(self) -> List[PopularRoute]:
        """
        Returns:
            One row per route, ordered by flight_count descending
        """
        rows = self.repository.query_routes_with_airports()
        routes = [create_popular_route(route, origin, destination) for route, origin, destination in rows]
        return sorted(routes, key=lambda route: route.flight_count, reverse=True)
