"""
Airline and airport lookups used by search forms and filter options
"""
from typing import List

from ..models import AirlineInfo, AirportInfo
from ..repositories.base import FlightRepository
from .search import create_airline_info, create_airport_info


class ReferenceDataService:
    """Read-only access to airlines and airports"""
    
    def __init__(self, repository: FlightRepository):
        self.repository = repository
    
    def list_airlines(self) -> List[AirlineInfo]:
        return [create_airline_info(airline) for airline in self.repository.list_airlines()]
    
    def list_airports(self) -> List[AirportInfo]:
        return [create_airport_info(airport) for airport in self.repository.list_airports()]
    
    def airports_by_city(self, city: str) -> List[AirportInfo]:
        """All airports serving a city, matched on the exact city name"""
        return [create_airport_info(airport) for airport in self.repository.airports_by_city(city)]
