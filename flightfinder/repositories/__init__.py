"""
Flight repositories
"""

from .base import FlightRepository
from .memory_repository import InMemoryFlightRepository
from .sql_repository import SqlFlightRepository

__all__ = [
    'FlightRepository',
    'InMemoryFlightRepository',
    'SqlFlightRepository'
]
