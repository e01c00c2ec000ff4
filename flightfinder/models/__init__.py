"""
API models and repository records
"""

from .schemas import (
    SearchRequest,
    SearchFilters,
    SearchResponse,
    SearchMetadata,
    FlightSearchResult,
    PopularRoute,
    AirlineInfo,
    AirportInfo,
    ErrorResponse,
    SortOption,
    TripType,
    TimeWindow
)
from .records import Airline, Airport, Flight, Route, FlightRow, RouteRow

__all__ = [
    'SearchRequest',
    'SearchFilters',
    'SearchResponse',
    'SearchMetadata',
    'FlightSearchResult',
    'PopularRoute',
    'AirlineInfo',
    'AirportInfo',
    'ErrorResponse',
    'SortOption',
    'TripType',
    'TimeWindow',
    'Airline',
    'Airport',
    'Flight',
    'Route',
    'FlightRow',
    'RouteRow'
]
