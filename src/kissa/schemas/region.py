"""Pydantic schemas for region data."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RegionSortField = Literal[
    "name",
    "created_at",
    "updated_at",
    "visit_count",
    "favorite_count",
    "distance",
]


class RegionFilters(BaseModel):
    """Non-geographic region filters."""

    status: str | None = None
    created_by: str | None = None
    keyword: str | None = None
    tags: list[str] = Field(default_factory=list)


class RegionResponse(BaseModel):
    """Region response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    short_description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    status: str
    created_by: str
    tags: list[str] = Field(default_factory=list)
    visit_count: int = 0
    favorite_count: int = 0
    place_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Computed when a proximity filter is applied
    distance_meters: float | None = None
    distance_km: float | None = None


class RegionListResponse(BaseModel):
    """Response for region list endpoint."""

    items: list[RegionResponse]
    count: int
    total_pages: int
    current_page: int


class RegionSearchResponse(RegionListResponse):
    """Response for region keyword search."""

    search_term: str
