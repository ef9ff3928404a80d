"""Check-in creation and lookups."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from kissa.config import settings
from kissa.errors import (
    CheckinNotFoundError,
    CheckinTooFarError,
    PlaceNotFoundError,
    PlaceNotPublishedError,
    UserInactiveError,
    UserNotFoundError,
)
from kissa.models.base import new_id
from kissa.models.checkin import Checkin
from kissa.repositories.checkin import CheckinRepository, UserRepository
from kissa.repositories.place import PlaceRepository
from kissa.schemas.checkin import CheckinCreate
from kissa.schemas.geo import Coordinate
from kissa.services.checkin_validator import check_checkin_location

logger = logging.getLogger(__name__)


async def create_checkin(
    db: AsyncSession,
    user_id: str,
    payload: CheckinCreate,
    max_distance_meters: float | None = None,
) -> Checkin:
    """
    Record a check-in after verifying the user is physically near the place.

    Runs inside the caller's session; the request dependency commits or
    rolls back the whole unit.

    Args:
        db: Database session
        user_id: ID of the user checking in
        payload: Validated check-in request
        max_distance_meters: Geofence radius, defaults to the configured value

    Returns:
        The created check-in, with distance_meters set

    Raises:
        UserNotFoundError, UserInactiveError: Unknown or inactive user
        PlaceNotFoundError, PlaceNotPublishedError: Unknown or unpublished place
        CheckinTooFarError: Reported location is outside the geofence
        RepositoryError: A database operation failed
    """
    if max_distance_meters is None:
        max_distance_meters = settings.checkin_max_distance_meters

    user = await UserRepository(db).get(user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")
    if not user.is_active:
        raise UserInactiveError(f"User {user_id} is not active")

    places = PlaceRepository(db)
    place = await places.get(payload.place_id)
    if place is None:
        raise PlaceNotFoundError(f"Place {payload.place_id} not found")
    if not place.is_published:
        raise PlaceNotPublishedError(f"Cannot check in to unpublished place {payload.place_id}")

    place_location = Coordinate(latitude=place.latitude, longitude=place.longitude)
    try:
        distance = check_checkin_location(payload.user_location, place_location, max_distance_meters)
    except CheckinTooFarError as e:
        logger.info(
            f"Rejected checkin by {user_id} at {place.id}: {e.distance_meters:.0f} m away "
            f"(limit {max_distance_meters:.0f} m)"
        )
        raise

    checkin = Checkin(
        id=new_id(),
        user_id=user_id,
        place_id=place.id,
        comment=payload.comment,
        rating=payload.rating,
        user_latitude=payload.user_location.latitude,
        user_longitude=payload.user_location.longitude,
        status="active",
        is_private=payload.is_private,
    )
    checkins = CheckinRepository(db)
    await checkins.create(checkin)
    await places.increment_checkin_count(place.id)

    if payload.rating is not None:
        average = await checkins.average_rating_for_place(place.id)
        await places.update_average_rating(place.id, average)

    checkin.distance_meters = distance
    logger.info(f"User {user_id} checked in at {place.name} ({place.id})")
    return checkin


async def get_checkin(db: AsyncSession, checkin_id: str, viewer_id: str | None = None) -> Checkin:
    """
    Load an active check-in.

    Private check-ins are only visible to their owner; anyone else gets
    CheckinNotFoundError, the same as for a missing or hidden one.
    """
    checkin = await CheckinRepository(db).get(checkin_id)
    if checkin is None or checkin.status != "active":
        raise CheckinNotFoundError(f"Checkin {checkin_id} not found")
    if checkin.is_private and checkin.user_id != viewer_id:
        raise CheckinNotFoundError(f"Checkin {checkin_id} not found")
    return checkin


async def list_user_checkins(
    db: AsyncSession,
    user_id: str,
    limit: int = 20,
    viewer_id: str | None = None,
) -> list[Checkin]:
    """
    A user's active check-ins, newest first.

    Private check-ins are included only when the viewer is the user.

    Raises:
        UserNotFoundError: Unknown user
    """
    if await UserRepository(db).get(user_id) is None:
        raise UserNotFoundError(f"User {user_id} not found")
    return await CheckinRepository(db).list_for_user(
        user_id, limit, include_private=viewer_id == user_id
    )


async def list_place_checkins(db: AsyncSession, place_id: str, limit: int = 20) -> list[Checkin]:
    """Public active check-ins at a place, newest first."""
    if await PlaceRepository(db).get(place_id) is None:
        raise PlaceNotFoundError(f"Place {place_id} not found")
    return await CheckinRepository(db).list_for_place(place_id, limit)
