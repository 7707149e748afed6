# ev_platform/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, error handlers, the vehicles router and startup seeding.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from ev_platform import __version__
from ev_platform.routers import vehicles
from ev_platform.database import SessionLocal, create_tables
from ev_platform.config import settings
from ev_platform.services.seed_service import get_vehicle_count, seed_vehicles
from ev_platform.services.vehicle_service import VehicleNotFoundError
from ev_platform.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="EV Platform API",
    description="Electric vehicle listings — create, browse, update and delete.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (allow the frontend dev server to call the API) ─────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = _field_errors(exc)
    logger.warning(f"Validation failed on {request.method} {request.url.path}: "
                   f"{[e['field'] for e in errors]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


@app.exception_handler(VehicleNotFoundError)
async def not_found_exception_handler(request: Request, exc: VehicleNotFoundError):
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router, tags=["🚗 Vehicles"])


# ── Startup ───────────────────────────────────────────────────────────────────
def seed_if_empty():
    """Seed the catalog on first launch. A failed seed never blocks startup."""
    db = SessionLocal()
    try:
        count = get_vehicle_count(db)
        if count:
            logger.info(f"Database already seeded ({count} vehicles), skipping seeding")
            return
        seed_vehicles(db)
        logger.info("✅ Database seeded")
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}", exc_info=True)
    finally:
        db.close()


@app.on_event("startup")
async def startup():
    logger.info("🚀 EV Platform backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    if settings.SEED_ON_STARTUP:
        seed_if_empty()
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 EV Platform backend shutting down...")
