"""Region listing, keyword search and suggestions."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import InvalidSearchError
from kissa.repositories.region import RegionRepository
from kissa.schemas.geo import ProximityFilter
from kissa.schemas.region import (
    RegionFilters,
    RegionListResponse,
    RegionResponse,
    RegionSearchResponse,
)
from kissa.schemas.search import PageRequest, SortSpec
from kissa.services.pagination import total_pages
from kissa.services.proximity_search import ProximitySearch

logger = logging.getLogger(__name__)

POPULARITY_SORT = SortSpec(field="popularity", direction="desc")


async def list_regions(
    db: AsyncSession,
    filters: RegionFilters,
    proximity: ProximityFilter | None,
    sort: SortSpec,
    page: PageRequest,
) -> RegionListResponse:
    """List regions matching filters, optionally restricted to a radius."""
    result = await ProximitySearch(RegionRepository(db)).search(filters, proximity, sort, page)
    return RegionListResponse(
        items=[RegionResponse.model_validate(region) for region in result.items],
        count=result.total_count,
        total_pages=total_pages(result.total_count, page.limit),
        current_page=page.page,
    )


async def search_regions(
    db: AsyncSession,
    keyword: str,
    *,
    tags: list[str] | None = None,
    proximity: ProximityFilter | None = None,
    sort: SortSpec | None = None,
    page: PageRequest,
) -> RegionSearchResponse:
    """
    Search published regions by name.

    Raises:
        InvalidSearchError: If the keyword is blank
    """
    trimmed = keyword.strip() if keyword else ""
    if not trimmed:
        raise InvalidSearchError("Search keyword is required")

    filters = RegionFilters(keyword=trimmed, tags=tags or [], status="published")
    result = await ProximitySearch(RegionRepository(db)).search(
        filters, proximity, sort or POPULARITY_SORT, page
    )
    logger.info(f"Region search {trimmed!r} matched {result.total_count} regions")

    return RegionSearchResponse(
        items=[RegionResponse.model_validate(region) for region in result.items],
        count=result.total_count,
        total_pages=total_pages(result.total_count, page.limit),
        current_page=page.page,
        search_term=trimmed,
    )


async def region_search_suggestions(db: AsyncSession, partial: str, limit: int = 10) -> list[str]:
    trimmed = partial.strip() if partial else ""
    if len(trimmed) < 2:
        return []

    regions, _ = await RegionRepository(db).fetch(
        RegionFilters(keyword=trimmed, status="published"),
        sort=SortSpec(field="created_at", direction="desc"),
        limit=limit,
    )
    return list(dict.fromkeys(region.name for region in regions))[:limit]
