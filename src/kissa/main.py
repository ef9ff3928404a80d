"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kissa.admin.app import setup_admin
from kissa.api.routes import checkins, favorites, health, places, regions, users
from kissa.config import settings
from kissa.database import engine
from kissa.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    logger.info(
        f"Kissa API starting (checkin geofence {settings.checkin_max_distance_meters:.0f} m)"
    )

    yield

    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="Kissa API",
    description="Location-based catalogue of regions, places and check-ins",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],  # Frontend development servers
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(regions.router, prefix="/api", tags=["regions"])
app.include_router(places.router, prefix="/api", tags=["places"])
app.include_router(checkins.router, prefix="/api", tags=["checkins"])
app.include_router(favorites.router, prefix="/api", tags=["favorites"])
app.include_router(users.router, prefix="/api", tags=["users"])

setup_admin(app)
