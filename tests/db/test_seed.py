"""
Tests for the sample data seed
"""

from datetime import date, datetime

from flightdb.ingestion.seed import seed_database
from flightdb.ingestion.utils import FLIGHT_DATA, schedule_time
from flightdb.models import Airline, Airport, Flight, Route


class TestSeedDatabase:
    def test_seeds_empty_database(self, session_factory):
        summary = seed_database(session_factory, reference_day=date(2024, 12, 24))

        assert summary.seeded is True
        assert (summary.airlines, summary.airports, summary.routes, summary.flights) == (8, 19, 26, 9)

        db = session_factory()
        try:
            assert db.query(Airline).count() == 8
            assert db.query(Airport).count() == 19
            assert db.query(Route).count() == 26
            assert db.query(Flight).count() == 9
        finally:
            db.close()

    def test_second_run_is_skipped(self, session_factory):
        seed_database(session_factory)
        summary = seed_database(session_factory)

        assert summary.seeded is False
        assert summary.message == "Database already seeded, skipping"

        db = session_factory()
        try:
            assert db.query(Flight).count() == len(FLIGHT_DATA)
        finally:
            db.close()

    def test_flights_follow_reference_day(self, session_factory):
        seed_database(session_factory, reference_day=date(2024, 12, 24))

        db = session_factory()
        try:
            flight = db.query(Flight).filter(Flight.flight_number == "AF009").one()
            assert flight.departure_time == datetime(2024, 12, 25, 22, 15)
            assert flight.arrival_time == datetime(2024, 12, 26, 1, 30)
            assert flight.duration_minutes == 495
            assert flight.stops == 0
        finally:
            db.close()

    def test_every_flight_arrives_after_departure(self, session_factory):
        seed_database(session_factory)

        db = session_factory()
        try:
            for flight in db.query(Flight).all():
                assert flight.arrival_time > flight.departure_time
                assert flight.origin_airport_id != flight.destination_airport_id
        finally:
            db.close()


class TestScheduleTime:
    def test_offsets_from_reference_day(self):
        assert schedule_time(date(2024, 12, 31), 1, "06:20") == datetime(2025, 1, 1, 6, 20)

    def test_same_day(self):
        assert schedule_time(date(2024, 12, 24), 0, "00:00") == datetime(2024, 12, 24)
