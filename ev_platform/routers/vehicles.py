# ev_platform/routers/vehicles.py
"""Vehicle listings — CRUD over the vehicles table."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ev_platform.database import get_db
from ev_platform.schemas.vehicle import VehicleCreate, VehicleUpdate, VehicleOut
from ev_platform.services import vehicle_service
from ev_platform.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/vehicles", response_model=list[VehicleOut], summary="List all vehicles")
def list_vehicles(db: Session = Depends(get_db)):
    logger.info("Fetching all vehicles")
    return vehicle_service.list_vehicles(db)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Get a vehicle by ID")
def get_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    logger.info(f"Fetching vehicle with ID {vehicle_id}")
    return vehicle_service.get_vehicle(db, vehicle_id)


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Create a vehicle listing")
def create_vehicle(body: VehicleCreate, db: Session = Depends(get_db)):
    """Accident description is dropped when accidents is false. The ID is generated here."""
    return vehicle_service.create_vehicle(db, body)


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Partially update a vehicle")
def update_vehicle(vehicle_id: str, body: VehicleUpdate, db: Session = Depends(get_db)):
    """Only the keys present in the body change; everything else keeps its value."""
    return vehicle_service.update_vehicle(db, vehicle_id, body.to_patch())


@router.delete("/vehicles/{vehicle_id}", summary="Delete a vehicle")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    vehicle_service.delete_vehicle(db, vehicle_id)
    return {"status": "deleted", "id": vehicle_id}
