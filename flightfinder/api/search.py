"""
Flight Search API endpoints
"""

from fastapi import APIRouter, Depends, status
import uuid

from ..models import SearchRequest, SearchResponse, SearchMetadata, ErrorResponse
from ..core import settings
from ..core.database import get_repository
from ..repositories import FlightRepository
from ..services import FlightSearchService

router = APIRouter(prefix="/search", tags=["search"])


@router.post(
    "",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Rejected by the search service (ValidationError raised outside request body parsing)"
        },
        422: {"description": "Malformed request body"},
        500: {"model": ErrorResponse, "description": "Repository failure"}
    },
    summary="Search for flights",
    description="Search one leg between two cities on a given day, with optional filters and sorting"
)
def search_flights(
    request: SearchRequest,
    repository: FlightRepository = Depends(get_repository)
) -> SearchResponse:
    """
    Search for flights based on criteria
    
    - **origin_city** / **destination_city**: City names (any airport in the city matches)
    - **departure_date**: Departure date (YYYY-MM-DD)
    - **passengers**: Number of passengers (1-9)
    - **trip_type**: one_way or round_trip (each call searches a single leg)
    - **filters**: price range, max stops, airlines, departure time window, max duration
    - **sort**: price_asc (default), price_desc, duration_asc, duration_desc,
      departure_time_asc, departure_time_desc
    
    An empty result list is a successful search.
    Malformed bodies are rejected with 422 before the search runs.
    """
    search_service = FlightSearchService(repository)
    outcome = search_service.search_with_meta(request)
    
    return SearchResponse(
        search_id=str(uuid.uuid4()),
        origin_city=request.origin_city,
        destination_city=request.destination_city,
        departure_date=request.departure_date,
        results=outcome.results,
        meta=SearchMetadata(
            returned=outcome.returned,
            sort=outcome.sort
        )
    )


@router.get(
    "/health",
    summary="Health check",
    description="Check if the search API is healthy"
)
async def health_check():
    """Simple health check endpoint"""
    return {
        "status": "healthy",
        "service": "flight-finder-api",
        "version": settings.APP_VERSION
    }
