# tests/conftest.py
"""Shared fixtures: in-memory SQLite session, API test client, sample payloads."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ev_platform.database import create_tables, get_db
from ev_platform.main import app


@pytest.fixture
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    create_tables(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def vehicle_payload():
    return {
        "brand": "BMW",
        "model": "i4",
        "year": 2022,
        "price": 55000,
        "range_km": 480,
        "color": "Blue",
        "condition": "New",
        "battery_capacity_kWh": 80,
        "charging_speed_kW": 150,
        "seats": 5,
        "drivetrain": "RWD",
        "location": "Hamburg",
        "autopilot": False,
        "kilometer_count": 0,
        "accidents": False,
        "accident_description": "minor",
        "images": ["a.jpg"],
    }
