"""Geolocation utilities for distance calculations and radius pre-filtering."""

import math
from typing import NamedTuple

from kissa.schemas.geo import Coordinate

# Mean Earth radius in meters (spherical model)
EARTH_RADIUS_METERS = 6_371_000.0

# Length of one degree of latitude on the same sphere (~111.195 km)
KM_PER_DEGREE = 2 * math.pi * (EARTH_RADIUS_METERS / 1000) / 360

# Absorbs float rounding at the box edges (~0.1 mm)
BOX_MARGIN_DEGREES = 1e-9


class BoundingBox(NamedTuple):
    """Axis-aligned latitude/longitude rectangle, in decimal degrees."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_delta(self) -> float:
        return (self.max_lat - self.min_lat) / 2

    @property
    def lng_delta(self) -> float:
        return (self.max_lng - self.min_lng) / 2

    def contains(self, point: Coordinate) -> bool:
        return (
            self.min_lat <= point.latitude <= self.max_lat
            and self.min_lng <= point.longitude <= self.max_lng
        )


def calculate_haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate great-circle distance between two points using the Haversine formula.

    The result is not rounded. Error against an ellipsoidal model is around 0.5%,
    which is fine for kilometer-scale radius filtering.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in meters (float)

    Example:
        >>> tokyo = Coordinate(latitude=35.6762, longitude=139.6503)
        >>> osaka = Coordinate(latitude=34.6937, longitude=135.5023)
        >>> 390_000 < calculate_haversine_distance(tokyo, osaka) < 395_000
        True
    """
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)

    dlat = math.radians(b.latitude - a.latitude)
    dlng = math.radians(b.longitude - a.longitude)

    # h = sin²(Δφ/2) + cos(φ1)·cos(φ2)·sin²(Δλ/2)
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_METERS * c


def calculate_bounding_box(center: Coordinate, radius_km: float) -> BoundingBox:
    """
    Calculate a lat/lng rectangle containing every point within radius_km of center.

    This is a cheap pre-filter for database queries. The box over-includes its
    corners; callers refine the candidates with calculate_haversine_distance.

    Latitude half-width is radius_km / KM_PER_DEGREE. Longitude half-width
    widens with latitude as meridians converge: roughly
    radius_km / (KM_PER_DEGREE * cos(lat)), computed here with the exact
    spherical form so the widest point of the circle is never clipped.
    Latitudes are clamped to [-90, 90]; a circle that reaches a pole gets the
    full longitude range. Boxes crossing the antimeridian are not split.

    Args:
        center: Center of the search circle
        radius_km: Search radius in kilometers

    Returns:
        BoundingBox around center
    """
    angular_radius = radius_km / (EARTH_RADIUS_METERS / 1000)
    lat_delta = radius_km / KM_PER_DEGREE + BOX_MARGIN_DEGREES

    min_lat = max(center.latitude - lat_delta, -90.0)
    max_lat = min(center.latitude + lat_delta, 90.0)

    cos_lat = math.cos(math.radians(center.latitude))
    if cos_lat <= math.sin(angular_radius):
        return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lng=-180.0, max_lng=180.0)

    lng_delta = math.degrees(math.asin(math.sin(angular_radius) / cos_lat)) + BOX_MARGIN_DEGREES

    return BoundingBox(
        min_lat=min_lat,
        max_lat=max_lat,
        min_lng=center.longitude - lng_delta,
        max_lng=center.longitude + lng_delta,
    )


def is_within_radius(center: Coordinate, point: Coordinate, radius_meters: float) -> bool:
    """Check whether point lies within radius_meters of center."""
    return calculate_haversine_distance(center, point) <= radius_meters
