"""Query parameter parsing shared by list and search endpoints."""

from typing import Literal

from fastapi import HTTPException, Query

from kissa.config import settings
from kissa.schemas.geo import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MAX_SEARCH_RADIUS_KM,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_SEARCH_RADIUS_KM,
    Coordinate,
    ProximityFilter,
)
from kissa.schemas.search import DISTANCE_SORT_FIELD, PageRequest, SortSpec


def proximity_params(
    lat: float | None = Query(None, ge=MIN_LATITUDE, le=MAX_LATITUDE, description="Center latitude"),
    lng: float | None = Query(None, ge=MIN_LONGITUDE, le=MAX_LONGITUDE, description="Center longitude"),
    radius_km: float | None = Query(
        None,
        ge=MIN_SEARCH_RADIUS_KM,
        le=MAX_SEARCH_RADIUS_KM,
        description="Search radius in kilometers",
    ),
) -> ProximityFilter | None:
    """Build a ProximityFilter when lat, lng and radius_km are all given."""
    supplied = [value is not None for value in (lat, lng, radius_km)]
    if not any(supplied):
        return None
    if not all(supplied):
        raise HTTPException(
            status_code=422,
            detail="lat, lng and radius_km must be supplied together",
        )
    if not settings.min_search_radius_km <= radius_km <= settings.max_search_radius_km:
        raise HTTPException(
            status_code=422,
            detail=(
                f"radius_km must be between {settings.min_search_radius_km} "
                f"and {settings.max_search_radius_km}"
            ),
        )
    return ProximityFilter(coordinates=Coordinate(latitude=lat, longitude=lng), radius_km=radius_km)


def page_params(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int | None = Query(None, ge=1, le=100, description="Page size"),
) -> PageRequest:
    return PageRequest(page=page, limit=min(limit or settings.default_page_size, settings.max_page_size))


def build_sort(
    field: str | None,
    order: Literal["asc", "desc"] | None,
    proximity: ProximityFilter | None,
) -> SortSpec | None:
    """
    Resolve sort/order query parameters.

    Distance sorts default to nearest first, everything else to descending.
    Returns None when no sort field was requested.
    """
    if field is None:
        return None
    if field == DISTANCE_SORT_FIELD:
        if proximity is None:
            raise HTTPException(
                status_code=422,
                detail="sort=distance requires lat, lng and radius_km",
            )
        return SortSpec(field=field, direction=order or "asc")
    return SortSpec(field=field, direction=order or "desc")
