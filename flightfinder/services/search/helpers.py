"""
Helper utilities for shaping repository records into API rows
"""

from ...models.records import Airline, Airport, Flight, Route
from ...models.schemas import FlightSearchResult, PopularRoute, AirlineInfo, AirportInfo


def create_search_result(
    flight: Flight,
    airline: Airline,
    origin: Airport,
    destination: Airport
) -> FlightSearchResult:
    """
    Denormalise a flight with its airline and airports into one display row.
    
    Args:
        flight: Flight record
        airline: Airline operating the flight
        origin: Departure airport
        destination: Arrival airport
        
    Returns:
        FlightSearchResult with airline and airport fields inlined
    """
    return FlightSearchResult(
        id=flight.id,
        airline_code=airline.code,
        airline_name=airline.name,
        airline_logo_url=airline.logo_url,
        flight_number=flight.flight_number,
        origin_airport_code=origin.code,
        origin_airport_name=origin.name,
        origin_city=origin.city,
        destination_airport_code=destination.code,
        destination_airport_name=destination.name,
        destination_city=destination.city,
        departure_time=flight.departure_time,
        arrival_time=flight.arrival_time,
        price=float(flight.price),
        currency=flight.currency,
        available_seats=flight.available_seats,
        stops=flight.stops,
        duration_minutes=flight.duration_minutes
    )


def create_popular_route(route: Route, origin: Airport, destination: Airport) -> PopularRoute:
    """
    Denormalise a route aggregate with both endpoint airports.
    """
    return PopularRoute(
        id=route.id,
        origin_airport_code=origin.code,
        origin_airport_name=origin.name,
        origin_city=origin.city,
        origin_country=origin.country,
        origin_latitude=float(origin.latitude),
        origin_longitude=float(origin.longitude),
        destination_airport_code=destination.code,
        destination_airport_name=destination.name,
        destination_city=destination.city,
        destination_country=destination.country,
        destination_latitude=float(destination.latitude),
        destination_longitude=float(destination.longitude),
        min_price=float(route.min_price),
        max_price=float(route.max_price),
        flight_count=route.flight_count,
        last_updated=route.last_updated
    )


def create_airline_info(airline: Airline) -> AirlineInfo:
    return AirlineInfo(id=airline.id, code=airline.code, name=airline.name, logo_url=airline.logo_url)


def create_airport_info(airport: Airport) -> AirportInfo:
    return AirportInfo(
        id=airport.id,
        code=airport.code,
        name=airport.name,
        city=airport.city,
        country=airport.country,
        latitude=float(airport.latitude),
        longitude=float(airport.longitude)
    )
