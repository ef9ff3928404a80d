"""Place listing, keyword search and suggestions."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import InvalidSearchError
from kissa.repositories.place import PlaceRepository
from kissa.schemas.geo import ProximityFilter
from kissa.schemas.place import (
    PlaceFilters,
    PlaceListResponse,
    PlaceResponse,
    PlaceSearchResponse,
)
from kissa.schemas.search import PageRequest, SortSpec
from kissa.services.pagination import total_pages
from kissa.services.proximity_search import ProximitySearch

logger = logging.getLogger(__name__)

POPULARITY_SORT = SortSpec(field="popularity", direction="desc")


async def list_places(
    db: AsyncSession,
    filters: PlaceFilters,
    proximity: ProximityFilter | None,
    sort: SortSpec,
    page: PageRequest,
) -> PlaceListResponse:
    """List places matching filters, optionally restricted to a radius."""
    result = await ProximitySearch(PlaceRepository(db)).search(filters, proximity, sort, page)
    return PlaceListResponse(
        items=[PlaceResponse.model_validate(place) for place in result.items],
        count=result.total_count,
        total_pages=total_pages(result.total_count, page.limit),
        current_page=page.page,
    )


async def search_places(
    db: AsyncSession,
    keyword: str,
    *,
    region_id: str | None = None,
    category: str | None = None,
    proximity: ProximityFilter | None = None,
    sort: SortSpec | None = None,
    page: PageRequest,
) -> PlaceSearchResponse:
    """
    Search published places by name.

    Results are ranked by popularity (visits, then favorites) unless another
    sort is given, e.g. distance when a location is supplied.

    Raises:
        InvalidSearchError: If the keyword is blank
    """
    trimmed = keyword.strip() if keyword else ""
    if not trimmed:
        raise InvalidSearchError("Search keyword is required")

    filters = PlaceFilters(
        keyword=trimmed,
        region_id=region_id,
        category=category,
        status="published",
    )
    result = await ProximitySearch(PlaceRepository(db)).search(
        filters, proximity, sort or POPULARITY_SORT, page
    )
    logger.info(f"Place search {trimmed!r} matched {result.total_count} places")

    return PlaceSearchResponse(
        items=[PlaceResponse.model_validate(place) for place in result.items],
        count=result.total_count,
        total_pages=total_pages(result.total_count, page.limit),
        current_page=page.page,
        search_term=trimmed,
    )


async def place_search_suggestions(
    db: AsyncSession,
    partial: str,
    region_id: str | None = None,
    limit: int = 10,
) -> list[str]:
    """Unique names of published places matching a partial keyword (2+ characters)."""
    trimmed = partial.strip() if partial else ""
    if len(trimmed) < 2:
        return []

    places, _ = await PlaceRepository(db).fetch(
        PlaceFilters(keyword=trimmed, region_id=region_id, status="published"),
        sort=SortSpec(field="created_at", direction="desc"),
        limit=limit,
    )
    return list(dict.fromkeys(place.name for place in places))[:limit]
