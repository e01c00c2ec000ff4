"""
Airline and airport reference data endpoints
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from ..models import AirlineInfo, AirportInfo
from ..core.database import get_repository
from ..repositories import FlightRepository
from ..services import ReferenceDataService

router = APIRouter(tags=["reference"])


@router.get("/airlines", response_model=List[AirlineInfo], summary="List airlines")
def get_airlines(repository: FlightRepository = Depends(get_repository)) -> List[AirlineInfo]:
    return ReferenceDataService(repository).list_airlines()


@router.get("/airports", response_model=List[AirportInfo], summary="List airports")
def get_airports(
    city: Optional[str] = Query(default=None, description="Only airports serving this city"),
    repository: FlightRepository = Depends(get_repository)
) -> List[AirportInfo]:
    service = ReferenceDataService(repository)
    if city is not None:
        return service.airports_by_city(city)
    return service.list_airports()
