"""
Database models package
"""

from .schema import (
    Base,
    Airline,
    Airport,
    Route,
    Flight
)

__all__ = [
    'Base',
    'Airline',
    'Airport',
    'Route',
    'Flight'
]
