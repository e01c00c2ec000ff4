"""
Master ingestion script - create tables, seed sample data and refresh route stats
"""

import argparse

from flightdb.config import SessionLocal, init_db, reset_db
from flightdb.ingestion.seed import seed_database
from flightdb.models import Airline, Airport, Route, Flight
from flightdb.update_route_stats import compute_and_update as update_route_stats


def main():
    """
    Run complete ingestion pipeline
    """
    parser = argparse.ArgumentParser(description='Run complete data ingestion pipeline')
    parser.add_argument('--reset', action='store_true', help='Reset database before ingestion')
    parser.add_argument('--refresh-routes', action='store_true',
                        help='Recompute route statistics from the seeded flights')
    args = parser.parse_args()
    
    print("\n" + "=" * 70)
    print(" " * 22 + "FLIGHT FINDER DATA INGESTION")
    print("=" * 70 + "\n")
    
    # Step 0: Initialize or reset database
    if args.reset:
        print("⚠️  Resetting database (all existing data will be deleted)...")
        response = input("Are you sure? (yes/no): ")
        if response.lower() == 'yes':
            reset_db()
        else:
            print("Aborting reset")
            return
    else:
        print("Initializing database...")
        init_db()
    
    print("\n" + "-" * 70)
    
    # Step 1: Seed sample data
    print("\nSTEP 1: Seeding Sample Data")
    print("-" * 70)
    summary = seed_database(SessionLocal)
    print(f"✓ {summary.message}")
    
    # Step 2: Refresh route aggregates
    if args.refresh_routes:
        print("\nSTEP 2: Refreshing route statistics from flights")
        print("-" * 70)
        update_route_stats()
    
    print("\n" + "=" * 70)
    print(" " * 20 + "INGESTION COMPLETED SUCCESSFULLY")
    print("=" * 70 + "\n")
    
    db = SessionLocal()
    try:
        print("Database Summary:")
        print(f"  Airlines:         {db.query(Airline).count()}")
        print(f"  Airports:         {db.query(Airport).count()}")
        print(f"  Routes:           {db.query(Route).count()}")
        print(f"  Flights:          {db.query(Flight).count()}")
    finally:
        db.close()
    
    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    main()
