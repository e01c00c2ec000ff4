"""
Parsing helpers for search input: calendar days and clock times
"""

import re
from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Union

from .exceptions import ValidationError

CLOCK_TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MIN_PASSENGERS = 1
MAX_PASSENGERS = 9


class DateWindow(NamedTuple):
    """Half-open departure window [start, end)"""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def parse_clock_time(value: str, field: str = "departure_time_range") -> int:
    """
    Convert an "HH:MM" clock time into minutes since midnight.

    Args:
        value: Clock time, hour 00-23 and minute 00-59
        field: Name reported in the error when the value is malformed

    Returns:
        Minutes since midnight (0-1439)

    Raises:
        ValidationError: If the value is not a well formed HH:MM string
    """
    if not isinstance(value, str):
        raise ValidationError(f"Time of day must be an HH:MM string, got {value!r}", field)

    match = CLOCK_TIME_PATTERN.match(value)
    if match is None:
        raise ValidationError(f"Invalid time of day {value!r}, expected HH:MM", field)

    hours, minutes = int(match.group(1)), int(match.group(2))
    return hours * 60 + minutes


def minutes_since_midnight(moment: Union[datetime, time]) -> int:
    """Clock time of a timestamp in minutes, ignoring date and timezone"""
    return moment.hour * 60 + moment.minute


def parse_departure_date(value: Union[str, date], field: str = "departure_date") -> date:
    """
    Parse a calendar day given as a date or an ISO "YYYY-MM-DD" string.

    Raises:
        ValidationError: If the value is not a real calendar date
    """
    if isinstance(value, datetime):
        raise ValidationError(f"{field} must be a calendar day (YYYY-MM-DD) without a time of day", field)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        raise ValidationError(f"Invalid {field} {value!r}, expected YYYY-MM-DD", field)

    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid {field} {value!r}: not a calendar date", field) from None


def check_passengers(passengers: int) -> int:
    """Reject passenger counts outside [1, 9]"""
    if isinstance(passengers, bool) or not isinstance(passengers, int):
        raise ValidationError(f"passengers must be an integer, got {passengers!r}", "passengers")
    if not MIN_PASSENGERS <= passengers <= MAX_PASSENGERS:
        raise ValidationError(
            f"passengers must be between {MIN_PASSENGERS} and {MAX_PASSENGERS}, got {passengers}",
            "passengers"
        )
    return passengers


def day_window(day: date) -> DateWindow:
    """Departure window covering one calendar day: [day 00:00, day+1 00:00)"""
    start = datetime.combine(day, time.min)
    return DateWindow(start=start, end=start + timedelta(days=1))
