"""Region API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.api.dependencies import build_sort, page_params, proximity_params
from kissa.database import get_db
from kissa.errors import InvalidSearchError, RepositoryError
from kissa.repositories.region import RegionRepository
from kissa.schemas.geo import ProximityFilter
from kissa.schemas.region import (
    RegionFilters,
    RegionListResponse,
    RegionResponse,
    RegionSearchResponse,
    RegionSortField,
)
from kissa.schemas.search import PageRequest, SortSpec
from kissa.services.regions import list_regions, region_search_suggestions, search_regions

router = APIRouter()


@router.get("/regions", response_model=RegionListResponse)
async def get_regions(
    status: str | None = Query(None, description="draft, published or archived"),
    created_by: str | None = Query(None, description="Creator user ID"),
    keyword: str | None = Query(None, description="Substring of the region name"),
    tag: list[str] | None = Query(None, description="Match regions having any of these tags"),
    sort: RegionSortField = Query("created_at", description="Sort field"),
    order: Literal["asc", "desc"] | None = Query(None, description="Sort direction"),
    proximity: ProximityFilter | None = Depends(proximity_params),
    page: PageRequest = Depends(page_params),
    db: AsyncSession = Depends(get_db),
) -> RegionListResponse:
    """
    List regions.

    Regions without coordinates never match a proximity filter.
    """
    filters = RegionFilters(
        status=status,
        created_by=created_by,
        keyword=keyword,
        tags=tag or [],
    )
    sort_spec = build_sort(sort, order, proximity) or SortSpec()

    try:
        return await list_regions(db, filters, proximity, sort_spec, page)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/regions/search", response_model=RegionSearchResponse)
async def search_regions_endpoint(
    q: str = Query(..., description="Keyword to search region names for"),
    tag: list[str] | None = Query(None),
    sort: RegionSortField | None = Query(None, description="Defaults to popularity"),
    order: Literal["asc", "desc"] | None = Query(None),
    proximity: ProximityFilter | None = Depends(proximity_params),
    page: PageRequest = Depends(page_params),
    db: AsyncSession = Depends(get_db),
) -> RegionSearchResponse:
    sort_spec = build_sort(sort, order, proximity)

    try:
        return await search_regions(
            db,
            q,
            tags=tag,
            proximity=proximity,
            sort=sort_spec,
            page=page,
        )
    except InvalidSearchError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/regions/suggestions", response_model=list[str])
async def get_region_suggestions(
    q: str = Query("", description="Partial region name"),
    limit: int = Query(10, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
) -> list[str]:
    try:
        return await region_search_suggestions(db, q, limit=limit)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Search failed")


@router.get("/regions/{region_id}", response_model=RegionResponse)
async def get_region(region_id: str, db: AsyncSession = Depends(get_db)) -> RegionResponse:
    try:
        region = await RegionRepository(db).get(region_id)
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load region")

    if region is None:
        raise HTTPException(status_code=404, detail="Region not found")
    return RegionResponse.model_validate(region)
