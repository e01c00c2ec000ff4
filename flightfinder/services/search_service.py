"""
Flight Search Service - Main entry point for flight searches
Validates a request, queries the repository for the base route/day/seat
constraints, applies the optional filters and sorts the result
"""
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError
from ..core.parsing import check_passengers, day_window, parse_departure_date
from ..models import FlightSearchResult, SearchRequest, SortOption
from ..repositories.base import FlightRepository
from .search import build_predicates, matches_all, resolve_sort, sort_results, create_search_result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """Sorted search results together with the sort key that was applied"""
    results: List[FlightSearchResult]
    sort: SortOption

    @property
    def returned(self) -> int:
        return len(self.results)


class FlightSearchService:
    """
    Main flight search service.
    
    Stateless apart from the repository it is given, so one instance can
    serve any number of concurrent searches. Repository errors are not
    caught here and reach the caller unchanged.
    """
    
    def __init__(self, repository: FlightRepository):
        self.repository = repository
    
    def search(self, request: Union[SearchRequest, Mapping[str, Any]]) -> List[FlightSearchResult]:
        """
        Search for flights.
        
        Args:
            request: SearchRequest, or a mapping with the same fields
            
        Returns:
            Matching flights, sorted; an empty list when nothing matches
            
        Raises:
            ValidationError: If the request is malformed
            RepositoryError: If the repository query fails
        """
        return self.search_with_meta(request).results
    
    def search_with_meta(self, request: Union[SearchRequest, Mapping[str, Any]]) -> SearchOutcome:
        """
        Search for flights and report which sort key was applied.
        """
        request = self._coerce_request(request)
        
        # Everything that can fail validation runs before the repository call
        departure_date = parse_departure_date(request.departure_date)
        passengers = check_passengers(request.passengers)
        predicates = build_predicates(request.filters)
        sort = resolve_sort(request.sort)
        window = day_window(departure_date)
        
        rows = self.repository.query_flights(
            request.origin_city,
            request.destination_city,
            window,
            passengers
        )
        
        results = [
            create_search_result(flight, airline, origin, destination)
            for flight, airline, origin, destination in rows
            if matches_all(predicates, flight, airline)
        ]
        results = sort_results(results, sort)
        
        logger.debug(
            f"Search {request.origin_city} -> {request.destination_city} on {departure_date}: "
            f"{len(rows)} candidates, {len(results)} after {len(predicates)} filters, sorted by {sort.value}"
        )
        
        return SearchOutcome(results=results, sort=sort)
    
    @staticmethod
    def _coerce_request(request: Union[SearchRequest, Mapping[str, Any]]) -> SearchRequest:
        if isinstance(request, SearchRequest):
            return request
        try:
            return SearchRequest.model_validate(request)
        except PydanticValidationError as e:
            errors = e.errors()
            field = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
            raise ValidationError(f"Invalid search request: {e}", field) from e
