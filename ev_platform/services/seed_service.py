# ev_platform/services/seed_service.py
"""
Initial catalog seeding.
Loads ev_platform/data/vehicles_seed.json ({"count": n, "data": [...]})
and creates every entry through the same validation as POST /vehicles.
"""

import json
import os

from sqlalchemy import func
from sqlalchemy.orm import Session
from ev_platform.models.vehicle import Vehicle
from ev_platform.schemas.vehicle import VehicleCreate
from ev_platform.services.vehicle_service import create_vehicle
from ev_platform.utils.logger import get_logger

logger = get_logger(__name__)

SEED_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "vehicles_seed.json")


def get_vehicle_count(db: Session) -> int:
    return db.query(func.count(Vehicle.id)).scalar() or 0


def load_seed_data(path: str = SEED_FILE) -> list[VehicleCreate]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return [VehicleCreate.model_validate(entry) for entry in raw.get("data", [])]


def seed_vehicles(db: Session, path: str = SEED_FILE) -> int:
    """Create every vehicle from the seed file. Returns the number created."""
    entries = load_seed_data(path)
    for entry in entries:
        create_vehicle(db, entry)
    logger.info(f"Seeded {len(entries)} vehicles from {os.path.basename(path)}")
    return len(entries)
