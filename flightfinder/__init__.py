"""
Flight Finder - city-to-city flight search service
"""

__version__ = "1.0.0"
