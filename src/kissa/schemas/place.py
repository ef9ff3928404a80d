"""Pydantic schemas for place data."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PlaceSortField = Literal[
    "name",
    "created_at",
    "updated_at",
    "visit_count",
    "favorite_count",
    "checkin_count",
    "distance",
]


class PlaceFilters(BaseModel):
    """Non-geographic place filters."""

    region_id: str | None = None
    category: str | None = None
    status: str | None = None
    created_by: str | None = None
    keyword: str | None = None
    tags: list[str] = Field(default_factory=list)


class PlaceResponse(BaseModel):
    """Place response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    short_description: str | None = None
    category: str
    region_id: str
    latitude: float
    longitude: float
    address: str
    phone: str | None = None
    website: str | None = None
    status: str
    created_by: str
    tags: list[str] = Field(default_factory=list)
    visit_count: int = 0
    favorite_count: int = 0
    checkin_count: int = 0
    average_rating: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Computed when a proximity filter is applied
    distance_meters: float | None = None
    distance_km: float | None = None


class PlaceListResponse(BaseModel):
    """Response for place list endpoint."""

    items: list[PlaceResponse]
    count: int
    total_pages: int
    current_page: int


class PlaceSearchResponse(PlaceListResponse):
    """Response for place keyword search."""

    search_term: str
