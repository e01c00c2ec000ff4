"""
Database models for the Flight Finder system
"""

from sqlalchemy import (
    Column, String, Integer, Float, Numeric, DateTime, ForeignKey,
    Index, UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()


class Airline(Base):
    """
    Airline entity with IATA code, name and optional logo
    """
    __tablename__ = 'airlines'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(3), unique=True, nullable=False, index=True)  # IATA code, e.g. "AF"
    name = Column(String(255), nullable=False)
    logo_url = Column(String(500))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    def __repr__(self):
        return f"<Airline(code='{self.code}', name='{self.name}')>"


class Airport(Base):
    """
    Airport entity with IATA code, city and coordinates for map display
    """
    __tablename__ = 'airports'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(3), unique=True, nullable=False, index=True)  # IATA code, e.g. "CDG"
    name = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    def __repr__(self):
        return f"<Airport(code='{self.code}', name='{self.name}', city='{self.city}')>"


class Route(Base):
    """
    Aggregated statistics for an origin/destination airport pair.
    Refreshed out of band from the flights table (see update_route_stats).
    """
    __tablename__ = 'routes'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    origin_airport_id = Column(Integer, ForeignKey('airports.id'), nullable=False)
    destination_airport_id = Column(Integer, ForeignKey('airports.id'), nullable=False)
    min_price = Column(Numeric(10, 2), nullable=False)
    max_price = Column(Numeric(10, 2), nullable=False)
    flight_count = Column(Integer, nullable=False, default=0)
    last_updated = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    origin = relationship("Airport", foreign_keys=[origin_airport_id])
    destination = relationship("Airport", foreign_keys=[destination_airport_id])
    
    __table_args__ = (
        UniqueConstraint('origin_airport_id', 'destination_airport_id', name='uq_route_origin_dest'),
        CheckConstraint('min_price <= max_price', name='ck_route_price_range'),
        CheckConstraint('flight_count >= 0', name='ck_route_flight_count'),
        Index('idx_route_flight_count', 'flight_count'),
    )
    
    def __repr__(self):
        return f"<Route(origin_id={self.origin_airport_id}, destination_id={self.destination_airport_id})>"


class Flight(Base):
    """
    A scheduled flight operated by one airline between two airports.
    duration_minutes is stored as ingested, not derived from the timestamps.
    """
    __tablename__ = 'flights'
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    airline_id = Column(Integer, ForeignKey('airlines.id'), nullable=False)
    flight_number = Column(String(10), nullable=False)
    origin_airport_id = Column(Integer, ForeignKey('airports.id'), nullable=False)
    destination_airport_id = Column(Integer, ForeignKey('airports.id'), nullable=False)
    
    # Timing information (stored local clock time, no timezone)
    departure_time = Column(DateTime, nullable=False)
    arrival_time = Column(DateTime, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    
    # Pricing and availability
    price = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default='EUR')
    available_seats = Column(Integer, nullable=False)
    stops = Column(Integer, nullable=False, default=0)  # 0 = nonstop
    
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    airline = relationship("Airline")
    origin = relationship("Airport", foreign_keys=[origin_airport_id])
    destination = relationship("Airport", foreign_keys=[destination_airport_id])
    
    # Indexes for search operations
    __table_args__ = (
        CheckConstraint('origin_airport_id <> destination_airport_id', name='ck_flight_distinct_airports'),
        CheckConstraint('arrival_time > departure_time', name='ck_flight_arrival_after_departure'),
        CheckConstraint('available_seats >= 0', name='ck_flight_seats'),
        CheckConstraint('stops >= 0', name='ck_flight_stops'),
        Index('idx_flight_route_departure', 'origin_airport_id', 'destination_airport_id', 'departure_time'),
        Index('idx_flight_airline', 'airline_id'),
    )
    
    def __repr__(self):
        return f"<Flight(number='{self.flight_number}', departure='{self.departure_time}')>"
