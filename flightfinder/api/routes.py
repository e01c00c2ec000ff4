"""
Popular routes API endpoints
"""

from fastapi import APIRouter, Depends
from typing import List

from ..models import PopularRoute
from ..core.database import get_repository
from ..repositories import FlightRepository
from ..services import PopularRouteService

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get(
    "/popular",
    response_model=List[PopularRoute],
    summary="Popular routes",
    description="Route statistics with endpoint airports, busiest routes first"
)
def get_popular_routes(repository: FlightRepository = Depends(get_repository)) -> List[PopularRoute]:
    return PopularRouteService(repository).list_popular_routes()
