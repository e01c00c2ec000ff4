"""
Sample reference data and helpers for seeding
"""

from datetime import date, datetime, time, timedelta
from typing import Dict, Tuple


# Airline code -> details
AIRLINE_DATA = {
    'AF': {'name': 'Air France', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Air-France-Logo.png'},
    'LH': {'name': 'Lufthansa', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Lufthansa-Logo.png'},
    'BA': {'name': 'British Airways', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/British-Airways-Logo.png'},
    'AA': {'name': 'American Airlines', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/American-Airlines-Logo.png'},
    'JL': {'name': 'Japan Airlines', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Japan-Airlines-Logo.png'},
    'QF': {'name': 'Qantas', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Qantas-Logo.png'},
    'EK': {'name': 'Emirates', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Emirates-Logo.png'},
    'SQ': {'name': 'Singapore Airlines', 'logo_url': 'https://logos-world.net/wp-content/uploads/2020/03/Singapore-Airlines-Logo.png'},
}

# IATA code -> airport details
AIRPORT_DATA = {
    # Europe
    'CDG': {'name': 'Charles de Gaulle Airport', 'city': 'Paris', 'country': 'France', 'latitude': 49.0097, 'longitude': 2.5479},
    'LHR': {'name': 'Heathrow Airport', 'city': 'London', 'country': 'United Kingdom', 'latitude': 51.4700, 'longitude': -0.4543},
    'FRA': {'name': 'Frankfurt Airport', 'city': 'Frankfurt', 'country': 'Germany', 'latitude': 50.0379, 'longitude': 8.5622},
    'FCO': {'name': 'Leonardo da Vinci Airport', 'city': 'Rome', 'country': 'Italy', 'latitude': 41.8003, 'longitude': 12.2389},
    'MAD': {'name': 'Madrid-Barajas Airport', 'city': 'Madrid', 'country': 'Spain', 'latitude': 40.4719, 'longitude': -3.5626},
    # North America
    'JFK': {'name': 'John F. Kennedy International Airport', 'city': 'New York', 'country': 'United States', 'latitude': 40.6413, 'longitude': -73.7781},
    'LAX': {'name': 'Los Angeles International Airport', 'city': 'Los Angeles', 'country': 'United States', 'latitude': 33.9416, 'longitude': -118.4085},
    'ORD': {'name': "O'Hare International Airport", 'city': 'Chicago', 'country': 'United States', 'latitude': 41.9742, 'longitude': -87.9073},
    'YYZ': {'name': 'Toronto Pearson International Airport', 'city': 'Toronto', 'country': 'Canada', 'latitude': 43.6777, 'longitude': -79.6248},
    # Asia-Pacific
    'NRT': {'name': 'Narita International Airport', 'city': 'Tokyo', 'country': 'Japan', 'latitude': 35.7720, 'longitude': 140.3929},
    'ICN': {'name': 'Incheon International Airport', 'city': 'Seoul', 'country': 'South Korea', 'latitude': 37.4602, 'longitude': 126.4407},
    'SIN': {'name': 'Singapore Changi Airport', 'city': 'Singapore', 'country': 'Singapore', 'latitude': 1.3644, 'longitude': 103.9915},
    'SYD': {'name': 'Sydney Kingsford Smith Airport', 'city': 'Sydney', 'country': 'Australia', 'latitude': -33.9399, 'longitude': 151.1753},
    'PEK': {'name': 'Beijing Capital International Airport', 'city': 'Beijing', 'country': 'China', 'latitude': 40.0801, 'longitude': 116.5846},
    # Middle East & Africa
    'DXB': {'name': 'Dubai International Airport', 'city': 'Dubai', 'country': 'United Arab Emirates', 'latitude': 25.2532, 'longitude': 55.3657},
    'DOH': {'name': 'Hamad International Airport', 'city': 'Doha', 'country': 'Qatar', 'latitude': 25.2731, 'longitude': 51.6089},
    'JNB': {'name': 'O.R. Tambo International Airport', 'city': 'Johannesburg', 'country': 'South Africa', 'latitude': -26.1367, 'longitude': 28.2411},
    # South America
    'GIG': {'name': 'Rio de Janeiro-Galeao International Airport', 'city': 'Rio de Janeiro', 'country': 'Brazil', 'latitude': -22.8099, 'longitude': -43.2505},
    'EZE': {'name': 'Ezeiza International Airport', 'city': 'Buenos Aires', 'country': 'Argentina', 'latitude': -34.8222, 'longitude': -58.5358},
}

# (origin, destination) -> (min price, max price, flight count)
ROUTE_DATA: Dict[Tuple[str, str], Tuple[str, str, int]] = {
    # European routes
    ('CDG', 'LHR'): ('89.00', '450.00', 12),
    ('LHR', 'CDG'): ('95.00', '420.00', 11),
    ('FRA', 'CDG'): ('78.00', '380.00', 8),
    ('MAD', 'FCO'): ('65.00', '320.00', 6),
    # Transatlantic routes
    ('CDG', 'JFK'): ('320.00', '1200.00', 8),
    ('JFK', 'CDG'): ('340.00', '1150.00', 7),
    ('LHR', 'JFK'): ('290.00', '1100.00', 10),
    ('JFK', 'LHR'): ('310.00', '1080.00', 9),
    # North American routes
    ('JFK', 'LAX'): ('180.00', '650.00', 15),
    ('LAX', 'JFK'): ('190.00', '680.00', 14),
    ('ORD', 'LAX'): ('150.00', '550.00', 12),
    ('YYZ', 'JFK'): ('120.00', '480.00', 9),
    # Asian routes
    ('NRT', 'ICN'): ('140.00', '520.00', 10),
    ('SIN', 'NRT'): ('280.00', '950.00', 6),
    ('PEK', 'NRT'): ('220.00', '780.00', 8),
    # Transpacific routes
    ('LAX', 'NRT'): ('450.00', '1500.00', 5),
    ('NRT', 'LAX'): ('480.00', '1450.00', 5),
    ('SYD', 'LAX'): ('520.00', '1800.00', 4),
    # Europe to Asia routes
    ('LHR', 'SIN'): ('380.00', '1400.00', 3),
    ('CDG', 'NRT'): ('420.00', '1350.00', 2),
    # Middle East hub routes
    ('DXB', 'LHR'): ('250.00', '900.00', 7),
    ('DXB', 'SIN'): ('180.00', '650.00', 5),
    ('DOH', 'JFK'): ('320.00', '1200.00', 4),
    # Southern Hemisphere routes
    ('SYD', 'SIN'): ('160.00', '580.00', 6),
    ('GIG', 'EZE'): ('95.00', '380.00', 8),
    ('JNB', 'DXB'): ('280.00', '850.00', 3),
}

# Sample flights, scheduled relative to a reference day:
# (airline, number, origin, destination, day offset, departure HH:MM,
#  arrival day offset, arrival HH:MM, price, seats, stops, duration minutes)
FLIGHT_DATA = [
    ('AF', 'AF007', 'CDG', 'JFK', 1, '10:30', 1, '13:45', '650.00', 45, 0, 495),
    ('AF', 'AF009', 'CDG', 'JFK', 1, '22:15', 2, '01:30', '580.00', 23, 0, 495),
    ('BA', 'BA115', 'LHR', 'JFK', 1, '11:00', 1, '14:20', '720.00', 67, 0, 500),
    ('AA', 'AA123', 'JFK', 'LAX', 1, '08:00', 1, '11:30', '320.00', 89, 0, 390),
    ('JL', 'JL052', 'NRT', 'SIN', 1, '16:45', 1, '23:30', '420.00', 34, 0, 465),
    ('LH', 'LH400', 'FRA', 'JFK', 2, '10:05', 2, '12:55', '540.00', 52, 0, 530),
    ('EK', 'EK001', 'DXB', 'LHR', 2, '07:45', 2, '11:55', '610.00', 120, 0, 490),
    ('SQ', 'SQ231', 'SIN', 'SYD', 2, '21:30', 3, '08:35', '505.00', 18, 0, 485),
    ('QF', 'QF011', 'SYD', 'LAX', 3, '09:50', 4, '06:20', '1180.00', 40, 1, 870),
]


def schedule_time(reference_day: date, day_offset: int, clock: str) -> datetime:
    """
    Build a timestamp from a reference day, a day offset and an HH:MM clock time
    
    Args:
        reference_day: Day the sample schedule is anchored on
        day_offset: Number of days after the reference day
        clock: Local clock time as "HH:MM"
        
    Returns:
        Naive datetime in local airport time
    """
    hours, minutes = (int(part) for part in clock.split(':'))
    return datetime.combine(reference_day + timedelta(days=day_offset), time(hours, minutes))

