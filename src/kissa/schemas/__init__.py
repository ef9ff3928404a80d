"""Pydantic schemas for API requests and responses."""

from kissa.schemas.checkin import CheckinCreate, CheckinResponse
from kissa.schemas.geo import Coordinate, ProximityFilter
from kissa.schemas.place import (
    PlaceFilters,
    PlaceListResponse,
    PlaceResponse,
    PlaceSearchResponse,
)
from kissa.schemas.region import (
    RegionFilters,
    RegionListResponse,
    RegionResponse,
    RegionSearchResponse,
)
from kissa.schemas.search import PageRequest, SortSpec

__all__ = [
    "CheckinCreate",
    "CheckinResponse",
    "Coordinate",
    "ProximityFilter",
    "PageRequest",
    "SortSpec",
    "PlaceFilters",
    "PlaceResponse",
    "PlaceListResponse",
    "PlaceSearchResponse",
    "RegionFilters",
    "RegionResponse",
    "RegionListResponse",
    "RegionSearchResponse",
]
