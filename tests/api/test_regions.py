"""Tests for the regions API endpoints."""

from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from kissa.database import get_db
from kissa.models.region import Region


def make_region(
    id: str,
    name: str,
    latitude: float | None = 35.0116,
    longitude: float | None = 135.7681,
) -> Region:
    return Region(
        id=id,
        name=name,
        latitude=latitude,
        longitude=longitude,
        status="published",
        created_by="owner",
        tags=["kissaten"],
        visit_count=100,
        favorite_count=10,
        place_count=4,
    )


def mock_db(results) -> AsyncMock:
    db = AsyncMock()
    db.execute = AsyncMock(side_effect=results)
    return db


def rows_and_count(rows: list[Region], count: int | None = None) -> list[MagicMock]:
    rows_result = MagicMock()
    rows_result.scalars.return_value.all.return_value = rows
    count_result = MagicMock()
    count_result.scalar_one.return_value = len(rows) if count is None else count
    return [rows_result, count_result]


async def get(test_app: FastAPI, url: str, db: AsyncMock):
    async def override() -> AsyncMock:
        yield db

    test_app.dependency_overrides[get_db] = override
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as client:
            return await client.get(url)
    finally:
        test_app.dependency_overrides.clear()


async def test_lists_regions(test_app: FastAPI) -> None:
    db = mock_db(rows_and_count([make_region("kyoto", "Kyoto Sanjo")], count=1))

    response = await get(test_app, "/api/regions", db)

    assert response.status_code == 200
    data = response.json()
    assert data["items"][0]["name"] == "Kyoto Sanjo"
    assert data["items"][0]["place_count"] == 4
    assert data["count"] == 1


async def test_regions_without_coordinates_excluded_from_proximity(test_app: FastAPI) -> None:
    kyoto = make_region("kyoto", "Kyoto Sanjo")
    unmapped = make_region("online", "Online Roasters", latitude=None, longitude=None)
    db = mock_db(rows_and_count([unmapped, kyoto]))

    response = await get(test_app, "/api/regions?lat=35.0116&lng=135.7681&radius_km=1", db)

    data = response.json()
    assert [r["id"] for r in data["items"]] == ["kyoto"]
    assert data["count"] == 1
    assert data["items"][0]["distance_meters"] == 0.0


async def test_proximity_query_constrains_coordinates(test_app: FastAPI) -> None:
    db = mock_db(rows_and_count([]))

    await get(test_app, "/api/regions?lat=35.0116&lng=135.7681&radius_km=1", db)

    stmt = str(db.execute.await_args_list[0].args[0])
    assert "regions.latitude BETWEEN" in stmt
    assert "regions.longitude BETWEEN" in stmt


async def test_search_regions(test_app: FastAPI) -> None:
    db = mock_db(rows_and_count([make_region("kyoto", "Kyoto Sanjo")]))

    response = await get(test_app, "/api/regions/search?q=kyoto&tag=kissaten", db)

    assert response.status_code == 200
    assert response.json()["search_term"] == "kyoto"
    stmt = str(db.execute.await_args_list[0].args[0])
    assert "regions.status" in stmt


async def test_search_error_returns_503(test_app: FastAPI) -> None:
    response = await get(
        test_app, "/api/regions/search?q=kyoto", mock_db(SQLAlchemyError("timeout"))
    )

    assert response.status_code == 503


async def test_region_suggestions(test_app: FastAPI) -> None:
    rows = [make_region("a", "Kyoto Sanjo"), make_region("b", "Kyoto Gion")]
    db = mock_db(rows_and_count(rows))

    response = await get(test_app, "/api/regions/suggestions?q=ky", db)

    assert response.json() == ["Kyoto Sanjo", "Kyoto Gion"]


async def test_get_missing_region(test_app: FastAPI) -> None:
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    db = AsyncMock()
    db.execute = AsyncMock(return_value=result)

    response = await get(test_app, "/api/regions/atlantis", db)

    assert response.status_code == 404
    assert response.json()["detail"] == "Region not found"
