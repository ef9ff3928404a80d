"""Pydantic schemas for check-in data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kissa.schemas.geo import Coordinate


class CheckinCreate(BaseModel):
    """Request body for creating a check-in."""

    place_id: str = Field(min_length=1, max_length=36)
    comment: str | None = Field(default=None, max_length=1000)
    rating: int | None = Field(default=None, ge=1, le=5)
    user_location: Coordinate
    is_private: bool = False


class CheckinResponse(BaseModel):
    """Check-in response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    place_id: str
    comment: str | None = None
    rating: int | None = None
    user_latitude: float | None = None
    user_longitude: float | None = None
    status: str
    is_private: bool
    created_at: datetime | None = None

    # Distance between the reported location and the place, in meters
    distance_meters: float | None = None
