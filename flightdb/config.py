"""
Database configuration and connection management
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from pydantic_settings import BaseSettings
from typing import Optional


class DatabaseSettings(BaseSettings):
    """
    Database connection settings, read from the environment and .env
    the same way as the API settings
    """
    DATABASE_URL: str = "sqlite:///flight_finder.db"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


DATABASE_URL = DatabaseSettings().DATABASE_URL


def create_db_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    """
    Create an engine for the given database URL
    """
    options = {
        'echo': False,  # Set to True for SQL query logging
        'pool_pre_ping': True,  # Verify connections before using
    }
    if not url.startswith('sqlite'):
        options['pool_recycle'] = 3600  # Recycle connections after 1 hour
    options.update(kwargs)
    return create_engine(url, **options)


def create_session_factory(bind: Engine) -> sessionmaker:
    """
    Create a session factory bound to an engine
    """
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


# Create engine
engine = create_db_engine()

# Create session factory
SessionLocal = create_session_factory(engine)


def init_db(bind: Optional[Engine] = None):
    """
    Initialize database - create all tables
    """
    from .models.schema import Base
    Base.metadata.create_all(bind=bind or engine)


def drop_db(bind: Optional[Engine] = None):
    """
    Drop all tables - use with caution!
    """
    from .models.schema import Base
    Base.metadata.drop_all(bind=bind or engine)


def reset_db(bind: Optional[Engine] = None):
    """
    Reset database - drop and recreate all tables
    """
    drop_db(bind)
    init_db(bind)
