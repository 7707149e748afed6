# ev_platform/schemas/vehicle.py
"""
Request / response schemas for the vehicles API.
Request schemas are strict: "2022" is not a year and "yes" is not a boolean.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

Condition = Literal["New", "Used"]
Drivetrain = Literal["FWD", "RWD", "AWD"]

MIN_YEAR = 1886   # First production automobile
MAX_INT = 2_147_483_647   # INTEGER column upper bound

# VARCHAR column widths, see models/vehicle.py
BRAND_LENGTH = 100
MODEL_LENGTH = 100
COLOR_LENGTH = 50
LOCATION_LENGTH = 200


def max_year() -> int:
    return date.today().year + 1


def check_year(year: Optional[int]) -> Optional[int]:
    if year is not None and not MIN_YEAR <= year <= max_year():
        raise ValueError(f"Year must be between {MIN_YEAR} and {max_year()}")
    return year


class VehicleCreate(BaseModel):
    brand: str = Field(..., min_length=1, max_length=BRAND_LENGTH)
    model: str = Field(..., min_length=1, max_length=MODEL_LENGTH)
    year: int
    price: float = Field(..., ge=0, allow_inf_nan=False)
    range_km: float = Field(..., ge=0, allow_inf_nan=False)
    color: str = Field(..., min_length=1, max_length=COLOR_LENGTH)
    condition: Condition
    battery_capacity_kWh: float = Field(..., ge=0, allow_inf_nan=False)
    charging_speed_kW: float = Field(..., ge=0, allow_inf_nan=False)
    seats: int = Field(..., gt=0, le=MAX_INT)
    drivetrain: Drivetrain
    location: str = Field(..., min_length=1, max_length=LOCATION_LENGTH)
    autopilot: bool
    kilometer_count: int = Field(..., ge=0, le=MAX_INT)
    accidents: bool
    accident_description: Optional[str] = None
    images: list[str] = Field(..., min_length=1)   # images[0] is the primary image

    @field_validator("year")
    @classmethod
    def validate_year(cls, year):
        return check_year(year)

    class Config:
        strict = True


class VehicleUpdate(BaseModel):
    """Partial update — only keys present in the request body are applied."""
    brand: Optional[str] = Field(None, min_length=1, max_length=BRAND_LENGTH)
    model: Optional[str] = Field(None, min_length=1, max_length=MODEL_LENGTH)
    year: Optional[int] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    range_km: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    color: Optional[str] = Field(None, min_length=1, max_length=COLOR_LENGTH)
    condition: Optional[Condition] = None
    battery_capacity_kWh: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    charging_speed_kW: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    seats: Optional[int] = Field(None, gt=0, le=MAX_INT)
    drivetrain: Optional[Drivetrain] = None
    location: Optional[str] = Field(None, min_length=1, max_length=LOCATION_LENGTH)
    autopilot: Optional[bool] = None
    kilometer_count: Optional[int] = Field(None, ge=0, le=MAX_INT)
    accidents: Optional[bool] = None
    accident_description: Optional[str] = None
    images: Optional[list[str]] = Field(None, min_length=1)

    @field_validator("year")
    @classmethod
    def validate_year(cls, year):
        return check_year(year)

    def to_patch(self) -> dict:
        """Supplied keys only. An explicit null is ignored except for accident_description."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key == "accident_description"
        }

    class Config:
        strict = True


class VehicleOut(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    price: float
    range_km: float
    color: str
    condition: str
    battery_capacity_kWh: float
    charging_speed_kW: float
    seats: int
    drivetrain: str
    location: str
    autopilot: bool
    kilometer_count: int
    accidents: bool
    accident_description: Optional[str] = None
    images: list[str] = []

    @property
    def primary_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    class Config:
        from_attributes = True
