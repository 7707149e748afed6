# tests/factories.py
"""Builders for VehicleOut records used by the client-side tests."""

from ev_platform.schemas.vehicle import VehicleOut

_counter = 0


def make_record(**overrides) -> VehicleOut:
    global _counter
    _counter += 1
    fields = dict(
        id=f"veh-{_counter}", brand="Tesla", model="Model 3", year=2023, price=42990.0, range_km=491.0,
        color="White", condition="New", battery_capacity_kWh=60.0, charging_speed_kW=170.0, seats=5,
        drivetrain="RWD", location="Berlin", autopilot=True, kilometer_count=0, accidents=False,
        accident_description=None, images=["front.jpg"],
    )
    fields.update(overrides)
    return VehicleOut(**fields)


def form_data(**overrides) -> dict:
    data = dict(
        brand="Tesla", model="Model Y", year=2024, price=49990, range_km=533, color="Black",
        condition="New", battery_capacity_kWh=75, charging_speed_kW=250, seats=5, drivetrain="AWD",
        location="Berlin", autopilot=True, kilometer_count=0, accidents=False,
        accident_description="", images=["https://img.example.com/y.jpg"],
    )
    data.update(overrides)
    return data
