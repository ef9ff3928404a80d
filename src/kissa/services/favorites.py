"""Favorite places and regions, keeping each target's favorite_count in step."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import (
    AlreadyFavoritedError,
    NotFavoritedError,
    PlaceNotFoundError,
    RegionNotFoundError,
    UserNotFoundError,
)
from kissa.models.place import Place
from kissa.models.region import Region
from kissa.repositories.base import SearchableRepository
from kissa.repositories.checkin import UserRepository
from kissa.repositories.favorite import (
    FavoriteRepository,
    PlaceFavoriteRepository,
    RegionFavoriteRepository,
)
from kissa.repositories.place import PlaceRepository
from kissa.repositories.region import RegionRepository
from kissa.schemas.favorite import FavoriteStatus

logger = logging.getLogger(__name__)


async def _require_user(db: AsyncSession, user_id: str) -> None:
    if await UserRepository(db).get(user_id) is None:
        raise UserNotFoundError(f"User {user_id} not found")


async def _require_target(
    targets: SearchableRepository, target_id: str, not_found: type[Exception], label: str
) -> None:
    if await targets.get(target_id) is None:
        raise not_found(f"{label.capitalize()} {target_id} not found")


async def _add(
    db: AsyncSession,
    favorites: FavoriteRepository,
    targets: SearchableRepository,
    not_found: type[Exception],
    user_id: str,
    target_id: str,
) -> FavoriteStatus:
    await _require_user(db, user_id)
    await _require_target(targets, target_id, not_found, favorites.label)

    if await favorites.find(user_id, target_id) is not None:
        raise AlreadyFavoritedError(f"{favorites.label.capitalize()} {target_id} is already favorited")

    await favorites.add(user_id, target_id)
    count = await favorites.refresh_count(target_id)
    logger.info(f"User {user_id} favorited {favorites.label} {target_id} ({count} favorites)")
    return FavoriteStatus(favorited=True, favorite_count=count)


async def _remove(
    favorites: FavoriteRepository,
    user_id: str,
    target_id: str,
) -> FavoriteStatus:
    favorite = await favorites.find(user_id, target_id)
    if favorite is None:
        raise NotFavoritedError(f"{favorites.label.capitalize()} {target_id} is not favorited")

    await favorites.remove(favorite)
    count = await favorites.refresh_count(target_id)
    logger.info(f"User {user_id} unfavorited {favorites.label} {target_id} ({count} favorites)")
    return FavoriteStatus(favorited=False, favorite_count=count)


async def add_place_favorite(db: AsyncSession, user_id: str, place_id: str) -> FavoriteStatus:
    """
    Add a place to a user's favorites.

    Raises:
        UserNotFoundError: Unknown user
        PlaceNotFoundError: Unknown place
        AlreadyFavoritedError: The user already favorites the place
    """
    return await _add(
        db, PlaceFavoriteRepository(db), PlaceRepository(db), PlaceNotFoundError, user_id, place_id
    )


async def remove_place_favorite(db: AsyncSession, user_id: str, place_id: str) -> FavoriteStatus:
    """
    Remove a place from a user's favorites.

    Raises:
        NotFavoritedError: The user does not favorite the place
    """
    return await _remove(PlaceFavoriteRepository(db), user_id, place_id)


async def add_region_favorite(db: AsyncSession, user_id: str, region_id: str) -> FavoriteStatus:
    return await _add(
        db, RegionFavoriteRepository(db), RegionRepository(db), RegionNotFoundError, user_id, region_id
    )


async def remove_region_favorite(db: AsyncSession, user_id: str, region_id: str) -> FavoriteStatus:
    return await _remove(RegionFavoriteRepository(db), user_id, region_id)


async def list_favorite_places(db: AsyncSession, user_id: str, limit: int = 20) -> list[Place]:
    """A user's favorite places, most recently favorited first."""
    await _require_user(db, user_id)
    return await PlaceFavoriteRepository(db).list_for_user(user_id, limit)


async def list_favorite_regions(db: AsyncSession, user_id: str, limit: int = 20) -> list[Region]:
    await _require_user(db, user_id)
    return await RegionFavoriteRepository(db).list_for_user(user_id, limit)
