# scripts/setup/init_db.py
"""
Initialize database — creates the vehicles table and optionally seeds it.
Run once before first launch, or after changing the model.
Usage: python scripts/setup/init_db.py [--seed]
"""

import argparse
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text

from ev_platform.config import settings
from ev_platform.database import SessionLocal, create_tables, engine
from ev_platform.services.seed_service import get_vehicle_count, seed_vehicles


def main():
    parser = argparse.ArgumentParser(description="Create tables and optionally seed the catalog")
    parser.add_argument("--seed", action="store_true", help="Load the bundled seed vehicles if the table is empty")
    args = parser.parse_args()

    print("🗄️  EV Platform DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {engine.url.render_as_string(hide_password=True)}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        print("\nMake sure PostgreSQL is running:")
        print("  docker-compose up -d db")
        print("  # or: sudo systemctl start postgresql")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"📊 Tables in database ({len(tables)} total):")
    for t in tables:
        print(f"   ✓ {t}")

    if args.seed:
        db = SessionLocal()
        try:
            count = get_vehicle_count(db)
            if count:
                print(f"\n⏭️  {count} vehicles already present, skipping seed")
            else:
                print(f"\n🌱 Seeded {seed_vehicles(db)} vehicles")
        finally:
            db.close()

    print("\n🎉 Database ready! You can now start the backend:")
    print(f"   uvicorn ev_platform.main:app --host {settings.BACKEND_HOST} --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()
