"""Two-phase proximity search: bounding-box candidates, then exact Haversine filtering."""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from kissa.config import settings
from kissa.schemas.geo import Coordinate, ProximityFilter
from kissa.schemas.search import PageRequest, SortSpec
from kissa.utils.geo import BoundingBox, calculate_bounding_box, calculate_haversine_distance

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CandidateRepository(Protocol):
    """What the search needs from an entity repository."""

    async def fetch(
        self,
        filters: Any,
        *,
        sort: SortSpec,
        bounding_box: BoundingBox | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> tuple[list[Any], int]: ...


@dataclass
class SearchPage(Generic[T]):
    """One page of results plus the size of the whole result set."""

    items: list[T]
    total_count: int


def location_of(entity: Any) -> Coordinate | None:
    """Read an entity's stored coordinates, or None when either is missing."""
    latitude = getattr(entity, "latitude", None)
    longitude = getattr(entity, "longitude", None)
    if latitude is None or longitude is None:
        return None
    # Stored rows were validated on write
    return Coordinate.model_construct(latitude=latitude, longitude=longitude)


class ProximitySearch:
    """
    Page through entities matching non-geographic filters and an optional proximity filter.

    Without a proximity filter the repository does all the work. With one, every
    bounding-box candidate is read from the repository in the requested order,
    batch_size rows at a time, then candidates further than the radius are
    dropped and pagination happens in memory, so total_count always reflects
    the exact-radius result set.

    Repository errors propagate unchanged.
    """

    def __init__(self, repository: CandidateRepository, batch_size: int | None = None):
        self.repository = repository
        self.batch_size = batch_size or settings.proximity_batch_size

    async def search(
        self,
        filters: Any,
        proximity: ProximityFilter | None,
        sort: SortSpec,
        page: PageRequest,
    ) -> SearchPage:
        if proximity is None:
            items, count = await self.repository.fetch(
                filters,
                sort=sort,
                offset=page.offset,
                limit=page.limit,
            )
            return SearchPage(items=items, total_count=count)

        center = proximity.coordinates
        box = calculate_bounding_box(center, proximity.radius_km)

        candidates, batches = await self.fetch_candidates(filters, sort, box)

        matches = filter_within_radius(candidates, center, proximity.radius_meters)
        if sort.by_distance:
            matches.sort(key=lambda match: match[1], reverse=sort.direction == "desc")

        logger.debug(
            f"Proximity search kept {len(matches)} of {len(candidates)} bounding-box candidates "
            f"({batches} batches)"
        )

        page_matches = matches[page.offset : page.offset + page.limit]
        items = []
        for entity, distance in page_matches:
            entity.distance_meters = distance
            entity.distance_km = round(distance / 1000, 2)
            items.append(entity)

        return SearchPage(items=items, total_count=len(matches))

    async def fetch_candidates(
        self, filters: Any, sort: SortSpec, box: BoundingBox
    ) -> tuple[list[Any], int]:
        """
        Read every row inside box, batch_size rows per repository call.

        Stops once the store count is reached or a batch comes back short.

        Returns:
            (candidates in store order, number of repository calls)
        """
        candidates: list[Any] = []
        batches = 0
        while True:
            batch, store_count = await self.repository.fetch(
                filters,
                sort=sort,
                bounding_box=box,
                offset=len(candidates),
                limit=self.batch_size,
            )
            batches += 1
            candidates.extend(batch)
            if len(batch) < self.batch_size or len(candidates) >= store_count:
                return candidates, batches


def filter_within_radius(
    candidates: list[T], center: Coordinate, radius_meters: float
) -> list[tuple[T, float]]:
    """
    Keep candidates within radius_meters of center, preserving their order.

    Returns:
        (entity, distance in meters) pairs
    """
    matches: list[tuple[T, float]] = []
    for entity in candidates:
        location = location_of(entity)
        if location is None:
            continue
        distance = calculate_haversine_distance(center, location)
        if distance <= radius_meters:
            matches.append((entity, distance))
    return matches
