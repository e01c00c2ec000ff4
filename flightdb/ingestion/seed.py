"""
Seed the database with sample airlines, airports, routes and flights
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional

from sqlalchemy.orm import Session

from ..models import Airline, Airport, Route, Flight
from .utils import AIRLINE_DATA, AIRPORT_DATA, ROUTE_DATA, FLIGHT_DATA, schedule_time


@dataclass(frozen=True)
class SeedSummary:
    """Outcome of a seeding run"""
    seeded: bool
    message: str
    airlines: int = 0
    airports: int = 0
    routes: int = 0
    flights: int = 0


def seed_database(
    session_factory: Callable[[], Session],
    reference_day: Optional[date] = None
) -> SeedSummary:
    """
    Insert the sample data set unless airports already exist.
    
    Args:
        session_factory: Factory returning a new session
        reference_day: Day the sample flights are scheduled after (default: today)
        
    Returns:
        SeedSummary describing what was inserted
    """
    reference_day = reference_day or date.today()
    db = session_factory()
    
    try:
        if db.query(Airport).first() is not None:
            return SeedSummary(seeded=False, message="Database already seeded, skipping")
        
        airlines = {}
        for code, data in AIRLINE_DATA.items():
            airlines[code] = Airline(code=code, name=data['name'], logo_url=data['logo_url'])
            db.add(airlines[code])
        
        airports = {}
        for code, data in AIRPORT_DATA.items():
            airports[code] = Airport(code=code, **data)
            db.add(airports[code])
        
        # Assign primary keys before building foreign keys
        db.flush()
        
        now = datetime.utcnow()
        for (origin, destination), (min_price, max_price, flight_count) in ROUTE_DATA.items():
            db.add(Route(
                origin_airport_id=airports[origin].id,
                destination_airport_id=airports[destination].id,
                min_price=Decimal(min_price),
                max_price=Decimal(max_price),
                flight_count=flight_count,
                last_updated=now
            ))
        
        for (airline, number, origin, destination, dep_offset, dep_clock,
             arr_offset, arr_clock, price, seats, stops, duration) in FLIGHT_DATA:
            db.add(Flight(
                airline_id=airlines[airline].id,
                flight_number=number,
                origin_airport_id=airports[origin].id,
                destination_airport_id=airports[destination].id,
                departure_time=schedule_time(reference_day, dep_offset, dep_clock),
                arrival_time=schedule_time(reference_day, arr_offset, arr_clock),
                price=Decimal(price),
                currency='EUR',
                available_seats=seats,
                stops=stops,
                duration_minutes=duration
            ))
        
        db.commit()
        
        return SeedSummary(
            seeded=True,
            message="Database seeded with sample data",
            airlines=len(AIRLINE_DATA),
            airports=len(AIRPORT_DATA),
            routes=len(ROUTE_DATA),
            flights=len(FLIGHT_DATA)
        )
    
    except Exception:
        db.rollback()
        raise
    
    finally:
        db.close()
