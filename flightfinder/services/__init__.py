"""
Search, route and reference data services
"""

from .search_service import FlightSearchService, SearchOutcome
from .route_service import PopularRouteService
from .reference_service import ReferenceDataService

__all__ = [
    'FlightSearchService',
    'SearchOutcome',
    'PopularRouteService',
    'ReferenceDataService'
]
