"""
Filter predicate builder

Turns optional search filters into a list of independent inclusion
predicates. A flight is kept only when every predicate accepts it.
"""

import logging
from typing import Callable, Iterable, List, Optional

from ...core.parsing import parse_clock_time, minutes_since_midnight
from ...models.records import Airline, Flight
from ...models.schemas import SearchFilters, TimeWindow

logger = logging.getLogger(__name__)

Predicate = Callable[[Flight, Airline], bool]


def min_price_predicate(min_price: float) -> Predicate:
    return lambda flight, airline: flight.price >= min_price


def max_price_predicate(max_price: float) -> Predicate:
    return lambda flight, airline: flight.price <= max_price


def max_stops_predicate(max_stops: int) -> Predicate:
    return lambda flight, airline: flight.stops <= max_stops


def airline_predicate(codes: Iterable[str]) -> Predicate:
    allowed = frozenset(codes)
    return lambda flight, airline: airline.code in allowed


def departure_window_predicate(window: TimeWindow) -> Predicate:
    """
    Accept flights whose departure clock time lies in [start, end].

    Clock times are compared as stored, without timezone conversion. A window
    whose end is before its start (e.g. 22:00-02:00) is evaluated with the
    same inclusive check and therefore matches nothing.

    Raises:
        ValidationError: If start or end is not HH:MM
    """
    start = parse_clock_time(window.start, "departure_time_range.start")
    end = parse_clock_time(window.end, "departure_time_range.end")
    
    if end < start:
        logger.warning(
            f"Departure window {window.start}-{window.end} wraps past midnight; "
            "no flight can match it"
        )
    
    def predicate(flight: Flight, airline: Airline) -> bool:
        return start <= minutes_since_midnight(flight.departure_time) <= end
    
    return predicate


def max_duration_predicate(max_duration_hours: float) -> Predicate:
    max_minutes = max_duration_hours * 60
    return lambda flight, airline: flight.duration_minutes <= max_minutes


def build_predicates(filters: Optional[SearchFilters]) -> List[Predicate]:
    """
    Build one predicate per populated filter field.

    Args:
        filters: Search filters, or None for no filtering

    Returns:
        Predicates in a fixed order: min price, max price, stops, airlines,
        departure window, duration. Absent fields contribute nothing and an
        empty airline list is treated as absent.
    """
    if filters is None:
        return []
    
    predicates = []
    
    if filters.min_price is not None:
        predicates.append(min_price_predicate(filters.min_price))
    
    if filters.max_price is not None:
        predicates.append(max_price_predicate(filters.max_price))
    
    if filters.max_stops is not None:
        predicates.append(max_stops_predicate(filters.max_stops))
    
    if filters.airlines:
        predicates.append(airline_predicate(filters.airlines))
    
    if filters.departure_time_range is not None:
        predicates.append(departure_window_predicate(filters.departure_time_range))
    
    if filters.max_duration_hours is not None:
        predicates.append(max_duration_predicate(filters.max_duration_hours))
    
    return predicates


def matches_all(predicates: Iterable[Predicate], flight: Flight, airline: Airline) -> bool:
    """Conjunction of every predicate; True when there are none"""
    return all(predicate(flight, airline) for predicate in predicates)
