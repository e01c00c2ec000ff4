"""
Refresh route aggregates (min/max price, flight count) from the flights table
"""

import argparse
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.orm import Session

from flightdb.config import SessionLocal
from flightdb.models.schema import Route

RouteStats = Dict[Tuple[int, int], Tuple[Decimal, Decimal, int]]


def compute_and_update(
    dry_run: bool = False,
    session_factory: Callable[[], Session] = SessionLocal,
    now: Optional[datetime] = None
) -> RouteStats:
    """
    Recompute statistics for every airport pair that has flights.

    Existing routes are updated in place and pairs without a route row get
    one. Routes with no flights keep their stored values.

    Returns:
        (origin id, destination id) -> (min price, max price, flight count)
    """
    db = session_factory()
    now = now or datetime.utcnow()
    try:
        # Query for price range and count grouped by airport pair
        sql = text("""
        SELECT f.origin_airport_id, f.destination_airport_id,
               MIN(f.price) AS min_price, MAX(f.price) AS max_price, COUNT(*) AS flight_count
        FROM flights f
        GROUP BY f.origin_airport_id, f.destination_airport_id
        """)

        result = db.execute(sql).fetchall()
        stats = {
            (row[0], row[1]): (Decimal(str(row[2])), Decimal(str(row[3])), int(row[4]))
            for row in result
        }

        if not stats:
            print("No flight data found to update routes.")
            return stats

        print(f"Found statistics for {len(stats)} routes")

        for (origin_id, destination_id), (min_price, max_price, count) in stats.items():
            print(f"Route {origin_id} -> {destination_id}: {count} flights, {min_price:.2f}-{max_price:.2f}")
            if dry_run:
                continue

            route = (
                db.query(Route)
                .filter(
                    Route.origin_airport_id == origin_id,
                    Route.destination_airport_id == destination_id
                )
                .first()
            )
            if route is None:
                route = Route(origin_airport_id=origin_id, destination_airport_id=destination_id)
                db.add(route)
            route.min_price = min_price
            route.max_price = max_price
            route.flight_count = count
            route.last_updated = now

        if not dry_run:
            db.commit()
            print("Route statistics updated successfully")
        else:
            print("Dry run - no changes committed")

        return stats

    except Exception:
        db.rollback()
        raise

    finally:
        db.close()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Refresh route statistics from flights')
    parser.add_argument('--dry-run', action='store_true', help='Print updates without committing')
    args = parser.parse_args()
    compute_and_update(dry_run=args.dry_run)
