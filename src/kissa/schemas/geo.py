"""Pydantic schemas for coordinates and proximity filters."""

from pydantic import BaseModel, ConfigDict, Field

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

MIN_SEARCH_RADIUS_KM = 0.1
MAX_SEARCH_RADIUS_KM = 50.0


class Coordinate(BaseModel):
    """A WGS84 latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    latitude: float = Field(ge=MIN_LATITUDE, le=MAX_LATITUDE)
    longitude: float = Field(ge=MIN_LONGITUDE, le=MAX_LONGITUDE)


class ProximityFilter(BaseModel):
    """Restricts a search to entities within radius_km of a center point."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinate
    radius_km: float = Field(ge=MIN_SEARCH_RADIUS_KM, le=MAX_SEARCH_RADIUS_KM)

    @property
    def radius_meters(self) -> float:
        return self.radius_km * 1000
