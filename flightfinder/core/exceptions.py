"""
Error taxonomy for flight search
"""

from typing import Optional


class FlightSearchError(Exception):
    """Base class for every error raised by the search core"""


class ValidationError(FlightSearchError, ValueError):
    """
    Malformed search input: bad calendar date, passenger count out of range,
    or a departure time that is not HH:MM.

    Always raised before the repository is touched.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class RepositoryError(FlightSearchError):
    """The flight repository failed to answer a query"""
