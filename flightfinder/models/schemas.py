"""
Request/Response models for the Flight Finder API
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime
from datetime import date as DateType
from enum import Enum

from ..core.parsing import parse_clock_time, parse_departure_date, check_passengers


class TripType(str, Enum):
    """Trip type options"""
    ONE_WAY = "one_way"
    ROUND_TRIP = "round_trip"


class SortOption(str, Enum):
    """Sort options for search results"""
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    DURATION_ASC = "duration_asc"
    DURATION_DESC = "duration_desc"
    DEPARTURE_TIME_ASC = "departure_time_asc"
    DEPARTURE_TIME_DESC = "departure_time_desc"


class TimeWindow(BaseModel):
    """Departure time-of-day window, inclusive on both ends"""
    start: str = Field(..., description="Earliest departure clock time (HH:MM)")
    end: str = Field(..., description="Latest departure clock time (HH:MM)")

    @field_validator('start', 'end')
    def validate_clock_time(cls, v, info):
        """Reject anything that is not HH:MM"""
        parse_clock_time(v, f"departure_time_range.{info.field_name}")
        return v

    class Config:
        json_schema_extra = {
            "example": {"start": "06:00", "end": "12:00"}
        }


class SearchFilters(BaseModel):
    """Optional search filters; every populated field narrows the results"""
    min_price: Optional[float] = Field(default=None, description="Minimum price (inclusive)")
    max_price: Optional[float] = Field(default=None, description="Maximum price (inclusive)")
    max_stops: Optional[int] = Field(default=None, ge=0, description="Maximum number of stops (0 = nonstop)")
    airlines: Optional[List[str]] = Field(default=None, description="Allowed airline codes")
    departure_time_range: Optional[TimeWindow] = Field(
        default=None,
        description="Departure time-of-day window"
    )
    max_duration_hours: Optional[float] = Field(default=None, description="Maximum flight duration in hours")


class SearchRequest(BaseModel):
    """Flight search request model"""
    origin_city: str = Field(..., min_length=1, description="Origin city name")
    destination_city: str = Field(..., min_length=1, description="Destination city name")
    departure_date: DateType = Field(..., description="Departure date (YYYY-MM-DD)")
    return_date: Optional[DateType] = Field(default=None, description="Return date for round trips")
    passengers: int = Field(default=1, description="Number of passengers (1-9)")
    trip_type: TripType = Field(default=TripType.ONE_WAY, description="Trip type")
    filters: Optional[SearchFilters] = Field(default=None, description="Optional filters")
    sort: Optional[str] = Field(
        default=None,
        description="Sort key; absent or unknown keys fall back to price_asc"
    )

    @field_validator('departure_date', 'return_date', mode='before')
    def validate_calendar_date(cls, v, info):
        """Accept only real calendar days"""
        if v is None:
            return v
        return parse_departure_date(v, info.field_name)

    @field_validator('passengers')
    def validate_passengers(cls, v):
        """Passenger count must be within 1-9"""
        return check_passengers(v)

    @model_validator(mode='after')
    def validate_return_date(self):
        """A return date cannot precede the outbound date"""
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValueError('return_date must not be before departure_date')
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "origin_city": "Paris",
                "destination_city": "New York",
                "departure_date": "2025-10-10",
                "passengers": 2,
                "trip_type": "one_way",
                "filters": {
                    "max_price": 800,
                    "max_stops": 0,
                    "airlines": ["AF"],
                    "departure_time_range": {"start": "06:00", "end": "23:59"}
                },
                "sort": "price_asc"
            }
        }


class FlightSearchResult(BaseModel):
    """A flight joined with its airline and both airports"""
    id: int = Field(..., description="Flight ID")
    airline_code: str = Field(..., description="Airline code")
    airline_name: str = Field(..., description="Airline name")
    airline_logo_url: Optional[str] = Field(default=None, description="Airline logo URL")
    flight_number: str = Field(..., description="Flight number")
    origin_airport_code: str = Field(..., description="Origin airport code")
    origin_airport_name: str = Field(..., description="Origin airport name")
    origin_city: str = Field(..., description="Origin city")
    destination_airport_code: str = Field(..., description="Destination airport code")
    destination_airport_name: str = Field(..., description="Destination airport name")
    destination_city: str = Field(..., description="Destination city")
    departure_time: datetime = Field(..., description="Departure time")
    arrival_time: datetime = Field(..., description="Arrival time")
    price: float = Field(..., description="Price")
    currency: str = Field(..., description="Currency code")
    available_seats: int = Field(..., description="Seats left")
    stops: int = Field(..., description="Number of stops")
    duration_minutes: int = Field(..., description="Flight duration in minutes")

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "airline_code": "AF",
                "airline_name": "Air France",
                "airline_logo_url": None,
                "flight_number": "AF007",
                "origin_airport_code": "CDG",
                "origin_airport_name": "Charles de Gaulle Airport",
                "origin_city": "Paris",
                "destination_airport_code": "JFK",
                "destination_airport_name": "John F. Kennedy International Airport",
                "destination_city": "New York",
                "departure_time": "2025-10-10T10:30:00",
                "arrival_time": "2025-10-10T13:45:00",
                "price": 650.0,
                "currency": "EUR",
                "available_seats": 45,
                "stops": 0,
                "duration_minutes": 495
            }
        }


class PopularRoute(BaseModel):
    """Route statistics with both endpoint airports"""
    id: int = Field(..., description="Route ID")
    origin_airport_code: str
    origin_airport_name: str
    origin_city: str
    origin_country: str
    origin_latitude: float
    origin_longitude: float
    destination_airport_code: str
    destination_airport_name: str
    destination_city: str
    destination_country: str
    destination_latitude: float
    destination_longitude: float
    min_price: float = Field(..., description="Cheapest known price on this route")
    max_price: float = Field(..., description="Most expensive known price on this route")
    flight_count: int = Field(..., ge=0, description="Number of flights on this route")
    last_updated: datetime = Field(..., description="When the statistics were last refreshed")


class AirlineInfo(BaseModel):
    """Airline reference data"""
    id: int
    code: str
    name: str
    logo_url: Optional[str] = None


class AirportInfo(BaseModel):
    """Airport reference data"""
    id: int
    code: str
    name: str
    city: str
    country: str
    latitude: float
    longitude: float


class SearchMetadata(BaseModel):
    """Search result metadata"""
    returned: int = Field(..., description="Number of results returned")
    sort: SortOption = Field(..., description="Sort key actually applied")


class SearchResponse(BaseModel):
    """Flight search response model"""
    search_id: str = Field(..., description="Unique search ID")
    origin_city: str = Field(..., description="Origin city")
    destination_city: str = Field(..., description="Destination city")
    departure_date: DateType = Field(..., description="Departure date")
    results: List[FlightSearchResult] = Field(..., description="Matching flights")
    meta: SearchMetadata = Field(..., description="Search metadata")


class ErrorResponse(BaseModel):
    """Error response model"""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "VALIDATION_ERROR",
                "message": "Invalid time of day '25:00', expected HH:MM",
                "details": {
                    "field": "departure_time_range.start"
                }
            }
        }
