# ev_platform/client/form_validation.py
"""
Client-side checks run before a create/update is sent.
Advisory only — the API validates again on receipt.
"""

from datetime import date
from typing import Optional

from ev_platform.schemas.vehicle import MIN_YEAR

REQUIRED_TEXT = {
    "brand": "Brand is required",
    "model": "Model is required",
    "color": "Color is required",
    "location": "Location is required",
}

STRICTLY_POSITIVE = {
    "price": "Price must be greater than 0",
    "range_km": "Range must be greater than 0",
    "battery_capacity_kWh": "Battery capacity must be greater than 0",
    "charging_speed_kW": "Charging speed must be greater than 0",
    "seats": "Seats must be greater than 0",
}


class FormValidationError(Exception):
    def __init__(self, errors: dict):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))


def _number(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def clean_images(images) -> list[str]:
    """Drop blank image URLs, keep order."""
    return [img.strip() for img in images or [] if isinstance(img, str) and img.strip()]


def validate_vehicle_form(data: dict, today: Optional[date] = None) -> dict:
    """Return {field: message} for every failed rule; empty dict when the form is valid."""
    errors = {}
    max_year = (today or date.today()).year + 1

    for field, message in REQUIRED_TEXT.items():
        if not str(data.get(field) or "").strip():
            errors[field] = message

    year = _number(data.get("year"))
    if year is None or not MIN_YEAR <= year <= max_year:
        errors["year"] = f"Year must be between {MIN_YEAR} and {max_year}"

    for field, message in STRICTLY_POSITIVE.items():
        value = _number(data.get(field))
        if value is None or value <= 0:
            errors[field] = message

    km = _number(data.get("kilometer_count", 0))
    if km is None or km < 0:
        errors["kilometer_count"] = "Kilometer count cannot be negative"

    if data.get("accidents") and not str(data.get("accident_description") or "").strip():
        errors["accident_description"] = "Accident description is required if accidents are reported"

    if not clean_images(data.get("images")):
        errors["images"] = "At least one image URL is required"

    return errors
