"""
Core configuration, errors and dependencies
"""

from .config import settings
from .exceptions import FlightSearchError, ValidationError, RepositoryError

__all__ = [
    'settings',
    'FlightSearchError',
    'ValidationError',
    'RepositoryError'
]
