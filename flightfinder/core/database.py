"""
Database and repository dependencies for FastAPI
"""

from flightdb.config import create_db_engine, create_session_factory

from .config import settings
from ..repositories import SqlFlightRepository

# Built once at process start and shared by every request
engine = create_db_engine(settings.DATABASE_URL)
SessionLocal = create_session_factory(engine)
repository = SqlFlightRepository(SessionLocal)


def get_repository() -> SqlFlightRepository:
    """
    Repository dependency for FastAPI routes
    Override with app.dependency_overrides to use another repository
    """
    return repository
