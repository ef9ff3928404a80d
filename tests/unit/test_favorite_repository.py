"""Unit tests for favorite persistence and favorite_count maintenance."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from kissa.errors import RepositoryError
from kissa.models.favorite import PlaceFavorite, RegionFavorite
from kissa.repositories.favorite import PlaceFavoriteRepository, RegionFavoriteRepository


def compile_pg(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def mock_db(result: MagicMock | None = None) -> AsyncMock:
    db = AsyncMock()
    db.add = MagicMock()
    db.execute = AsyncMock(return_value=result or MagicMock())
    return db


async def test_find_matches_user_and_place():
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    db = mock_db(result)

    assert await PlaceFavoriteRepository(db).find("user-1", "p1") is None

    compiled = compile_pg(db.execute.await_args.args[0])
    assert "FROM place_favorites" in compiled
    assert "place_favorites.user_id = " in compiled
    assert "place_favorites.place_id = " in compiled


async def test_add_flushes_new_row():
    db = mock_db()

    favorite = await RegionFavoriteRepository(db).add("user-1", "kyoto")

    assert isinstance(favorite, RegionFavorite)
    assert favorite.user_id == "user-1"
    assert favorite.region_id == "kyoto"
    db.add.assert_called_once_with(favorite)
    db.flush.assert_awaited_once()


async def test_duplicate_add_wrapped():
    db = mock_db()
    db.flush = AsyncMock(side_effect=IntegrityError("insert", {}, Exception("duplicate key")))

    with pytest.raises(RepositoryError):
        await PlaceFavoriteRepository(db).add("user-1", "p1")


async def test_remove_deletes_and_flushes():
    db = mock_db()
    favorite = PlaceFavorite(id="f1", user_id="user-1", place_id="p1")

    await PlaceFavoriteRepository(db).remove(favorite)

    db.delete.assert_awaited_once_with(favorite)
    db.flush.assert_awaited_once()


async def test_refresh_count_recounts_rows():
    result = MagicMock()
    result.scalar_one.return_value = 4
    db = mock_db(result)

    assert await PlaceFavoriteRepository(db).refresh_count("p1") == 4

    compiled = compile_pg(db.execute.await_args.args[0])
    assert compiled.startswith("UPDATE places SET ")
    assert "favorite_count=(SELECT count(*)" in compiled
    assert "FROM place_favorites" in compiled
    assert "RETURNING places.favorite_count" in compiled


async def test_region_count_targets_regions():
    result = MagicMock()
    result.scalar_one.return_value = 0
    db = mock_db(result)

    await RegionFavoriteRepository(db).refresh_count("kyoto")

    compiled = compile_pg(db.execute.await_args.args[0])
    assert compiled.startswith("UPDATE regions SET ")
    assert "FROM region_favorites" in compiled


async def test_refresh_count_wraps_database_error():
    db = mock_db()
    db.execute = AsyncMock(side_effect=SQLAlchemyError("boom"))

    with pytest.raises(RepositoryError):
        await RegionFavoriteRepository(db).refresh_count("kyoto")


async def test_user_listing_newest_favorite_first():
    result = MagicMock()
    result.scalars.return_value.all.return_value = ["p2", "p1"]
    db = mock_db(result)

    assert await PlaceFavoriteRepository(db).list_for_user("user-1", 10) == ["p2", "p1"]

    compiled = compile_pg(db.execute.await_args.args[0])
    assert "FROM places JOIN place_favorites ON place_favorites.place_id = places.id" in compiled
    assert "ORDER BY place_favorites.created_at DESC" in compiled
