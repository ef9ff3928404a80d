"""Place API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.api.dependencies import build_sort, page_params, proximity_params
from kissa.database import get_db
from kissa.errors import InvalidSearchError, RepositoryError
from kissa.repositories.place import PlaceRepository
from kissa.schemas.geo import ProximityFilter
from kissa.schemas.place import (
    PlaceFilters,
    PlaceListResponse,
    PlaceResponse,
    PlaceSearchResponse,
    PlaceSortField,
)
from kissa.schemas.search import PageRequest, SortSpec
from kissa.services.places import list_places, place_search_suggestions, search_places

router = APIRouter()


@router.get("/places", response_model=PlaceListResponse)
async def get_places(
    region_id: str | None = Query(None, description="Only places in this region"),
    category: str | None = Query(None, description="Place category"),
    status: str | None = Query(None, description="draft, published or archived"),
    created_by: str | None = Query(None, description="Creator user ID"),
    keyword: str | None = Query(None, description="Substring of the place name"),
    tag: list[str] | None = Query(None, description="Match places having any of these tags"),
    sort: PlaceSortField = Query("created_at", description="Sort field"),
    order: Literal["asc", "desc"] | None = Query(None, description="Sort direction"),
    proximity: ProximityFilter | None = Depends(proximity_params),
    page: PageRequest = Depends(page_params),
    db: AsyncSession = Depends(get_db),
) -> PlaceListResponse:
    """
    List places.

    With lat/lng/radius_km only places within the radius are returned, each
    annotated with its distance from the center.
    """
    filters = PlaceFilters(
        region_id=region_id,
        category=category,
        status=status,
        created_by=created_by,
        keyword=keyword,
        tags=tag or [],
    )
    sort_spec = build_sort(sort, order, proximity) or SortSpec()

    try:
        return await list_places(db, filters, proximity, sort_spec, page)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/places/search", response_model=PlaceSearchResponse)
async def search_places_endpoint(
    q: str = Query(..., description="Keyword to search place names for"),
    region_id: str | None = Query(None),
    category: str | None = Query(None),
    sort: PlaceSortField | None = Query(None, description="Defaults to popularity"),
    order: Literal["asc", "desc"] | None = Query(None),
    proximity: ProximityFilter | None = Depends(proximity_params),
    page: PageRequest = Depends(page_params),
    db: AsyncSession = Depends(get_db),
) -> PlaceSearchResponse:
    """Search published places by keyword, ranked by popularity or distance."""
    sort_spec = build_sort(sort, order, proximity)

    try:
        return await search_places(
            db,
            q,
            region_id=region_id,
            category=category,
            proximity=proximity,
            sort=sort_spec,
            page=page,
        )
    except InvalidSearchError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/places/suggestions", response_model=list[str])
async def get_place_suggestions(
    q: str = Query("", description="Partial place name"),
    region_id: str | None = Query(None),
    limit: int = Query(10, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
) -> list[str]:
    try:
        return await place_search_suggestions(db, q, region_id=region_id, limit=limit)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/places/{place_id}", response_model=PlaceResponse)
async def get_place(place_id: str, db: AsyncSession = Depends(get_db)) -> PlaceResponse:
    try:
        place = await PlaceRepository(db).get(place_id)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load place")

    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return PlaceResponse.model_validate(place)
