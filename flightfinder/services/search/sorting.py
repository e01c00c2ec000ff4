"""
Ranking/sort engine for search results
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from ...models.schemas import FlightSearchResult, SortOption

logger = logging.getLogger(__name__)

DEFAULT_SORT = SortOption.PRICE_ASC

# sort key -> (key function, descending)
SORT_KEYS: Dict[SortOption, Tuple[Callable[[FlightSearchResult], object], bool]] = {
    SortOption.PRICE_ASC: (lambda row: row.price, False),
    SortOption.PRICE_DESC: (lambda row: row.price, True),
    SortOption.DURATION_ASC: (lambda row: row.duration_minutes, False),
    SortOption.DURATION_DESC: (lambda row: row.duration_minutes, True),
    SortOption.DEPARTURE_TIME_ASC: (lambda row: row.departure_time, False),
    SortOption.DEPARTURE_TIME_DESC: (lambda row: row.departure_time, True),
}


def resolve_sort(key: Optional[Union[str, SortOption]]) -> SortOption:
    """
    Map a requested sort key to a known option.

    Absent or unrecognised keys fall back to price_asc.
    """
    if key is None:
        return DEFAULT_SORT
    try:
        return SortOption(key)
    except ValueError:
        logger.info(f"Unknown sort key {key!r}, falling back to {DEFAULT_SORT.value}")
        return DEFAULT_SORT


def sort_results(
    results: List[FlightSearchResult],
    key: Optional[Union[str, SortOption]] = None
) -> List[FlightSearchResult]:
    """
    Return a new list ordered by the given sort key.

    The sort is stable in both directions: rows with equal keys keep their
    relative input order.
    """
    key_func, descending = SORT_KEYS[resolve_sort(key)]
    return sorted(results, key=key_func, reverse=descending)
