"""Tests for the health check endpoints."""

from unittest.mock import AsyncMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from kissa.database import get_db


async def test_health_returns_ok(test_app: FastAPI) -> None:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_database_health(test_app: FastAPI) -> None:
    async def override() -> AsyncMock:
        yield AsyncMock()

    test_app.dependency_overrides[get_db] = override
    try:
        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
            response = await client.get("/health/db")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_database_health_unavailable(test_app: FastAPI) -> None:
    async def override() -> AsyncMock:
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("could not connect"))
        yield db

    test_app.dependency_overrides[get_db] = override
    try:
        async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
            response = await client.get("/health/db")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 503
