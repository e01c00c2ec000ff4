from .filters import Predicate, build_predicates, matches_all
from .sorting import DEFAULT_SORT, resolve_sort, sort_results
from .helpers import (
    create_search_result,
    create_popular_route,
    create_airline_info,
    create_airport_info
)

__all__ = [
    'Predicate',
    'build_predicates',
    'matches_all',
    'DEFAULT_SORT',
    'resolve_sort',
    'sort_results',
    'create_search_result',
    'create_popular_route',
    'create_airline_info',
    'create_airport_info'
]
