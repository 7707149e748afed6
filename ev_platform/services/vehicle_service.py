# ev_platform/services/vehicle_service.py
"""
Vehicle store — create, read, update and delete listings.
Every function takes the DB session explicitly; the router gets it from get_db().
Not-found is raised here, never checked in the router.
"""

from sqlalchemy.orm import Session
from ev_platform.models.vehicle import Vehicle, new_vehicle_id
from ev_platform.schemas.vehicle import VehicleCreate
from ev_platform.utils.logger import get_logger

logger = get_logger(__name__)

IMMUTABLE_FIELDS = {"id"}


class VehicleNotFoundError(Exception):
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle with ID {vehicle_id} not found")


def normalize_accident_description(vehicle: Vehicle) -> Vehicle:
    """No accidents → no accident description, whatever was submitted."""
    if not vehicle.accidents:
        vehicle.accident_description = None
    return vehicle


def apply_vehicle_patch(vehicle: Vehicle, patch: dict) -> Vehicle:
    """
    Overwrite only the keys present in the patch. Omitted keys keep their
    current value; the id is never patched.
    """
    for field, value in patch.items():
        if field in IMMUTABLE_FIELDS:
            continue
        if field == "images":
            value = list(value)
        setattr(vehicle, field, value)
    return normalize_accident_description(vehicle)


def list_vehicles(db: Session) -> list[Vehicle]:
    return db.query(Vehicle).all()


def get_vehicle(db: Session, vehicle_id: str) -> Vehicle:
    vehicle = db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
    if not vehicle:
        raise VehicleNotFoundError(vehicle_id)
    return vehicle


def create_vehicle(db: Session, body: VehicleCreate) -> Vehicle:
    vehicle = Vehicle(id=new_vehicle_id(), **body.model_dump())
    normalize_accident_description(vehicle)
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    logger.info(f"Vehicle created: {vehicle.id} ({vehicle.brand} {vehicle.model} {vehicle.year})")
    return vehicle


def update_vehicle(db: Session, vehicle_id: str, patch: dict) -> Vehicle:
    vehicle = get_vehicle(db, vehicle_id)
    apply_vehicle_patch(vehicle, patch)
    db.commit()
    db.refresh(vehicle)
    logger.info(f"Vehicle updated: {vehicle_id} fields={sorted(patch)}")
    return vehicle


def delete_vehicle(db: Session, vehicle_id: str) -> None:
    vehicle = get_vehicle(db, vehicle_id)
    db.delete(vehicle)
    db.commit()
    logger.info(f"Vehicle deleted: {vehicle_id}")
