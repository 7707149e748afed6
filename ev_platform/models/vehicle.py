# ev_platform/models/vehicle.py
"""
Vehicles table — one row per electric vehicle listing.
Images are kept in a single array column; the first entry is the primary image.
"""

import uuid

from sqlalchemy import Column, Integer, String, Float, Boolean, Text, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from ev_platform.database import Base
from ev_platform.schemas.vehicle import BRAND_LENGTH, MODEL_LENGTH, COLOR_LENGTH, LOCATION_LENGTH

# TEXT[] on PostgreSQL, JSON list on SQLite (tests / local runs)
ImageList = ARRAY(Text).with_variant(JSON(), "sqlite")


def new_vehicle_id() -> str:
    return str(uuid.uuid4())


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String(36), primary_key=True, default=new_vehicle_id)
    brand = Column(String(BRAND_LENGTH), nullable=False, index=True)
    model = Column(String(MODEL_LENGTH), nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    range_km = Column(Float, nullable=False)
    color = Column(String(COLOR_LENGTH), nullable=False)
    condition = Column(String(10), nullable=False)             # New | Used
    battery_capacity_kWh = Column(Float, nullable=False)
    charging_speed_kW = Column(Float, nullable=False)
    seats = Column(Integer, nullable=False)
    drivetrain = Column(String(3), nullable=False)             # FWD | RWD | AWD
    location = Column(String(LOCATION_LENGTH), nullable=False)
    autopilot = Column(Boolean, default=False, nullable=False)
    kilometer_count = Column(Integer, default=0, nullable=False)
    accidents = Column(Boolean, default=False, nullable=False)
    accident_description = Column(Text, nullable=True)         # Only kept when accidents is true
    images = Column(ImageList, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.id} {self.brand} {self.model} {self.year}>"
