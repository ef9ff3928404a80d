"""Geofence check for check-ins."""

from kissa.errors import CheckinTooFarError
from kissa.schemas.geo import Coordinate
from kissa.utils.geo import calculate_haversine_distance


def validate_checkin_location(
    user_location: Coordinate,
    place_location: Coordinate,
    max_distance_meters: float,
) -> bool:
    """
    Return True when the user is within max_distance_meters of the place.

    A threshold of 0 only accepts identical coordinates.
    """
    return calculate_haversine_distance(user_location, place_location) <= max_distance_meters


def check_checkin_location(
    user_location: Coordinate,
    place_location: Coordinate,
    max_distance_meters: float,
) -> float:
    """
    Measure how far the user is from the place, enforcing the geofence.

    Returns:
        Distance in meters

    Raises:
        CheckinTooFarError: If the distance exceeds max_distance_meters
    """
    distance = calculate_haversine_distance(user_location, place_location)
    if distance > max_distance_meters:
        raise CheckinTooFarError(distance, max_distance_meters)
    return distance
