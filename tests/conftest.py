"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from kissa.api.routes import checkins, favorites, health, places, regions, users


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the lifespan or admin mount, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(regions.router, prefix="/api")
    app.include_router(places.router, prefix="/api")
    app.include_router(checkins.router, prefix="/api")
    app.include_router(favorites.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    return app
