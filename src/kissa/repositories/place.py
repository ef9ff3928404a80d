"""Place persistence."""

import logging

from sqlalchemy import ColumnElement, update
from sqlalchemy.exc import SQLAlchemyError

from kissa.errors import RepositoryError
from kissa.models.place import Place
from kissa.repositories.base import SearchableRepository
from kissa.schemas.place import PlaceFilters

logger = logging.getLogger(__name__)


class PlaceRepository(SearchableRepository[Place, PlaceFilters]):
    model = Place
    sort_columns = {
        "name": (Place.name,),
        "created_at": (Place.created_at,),
        "updated_at": (Place.updated_at,),
        "visit_count": (Place.visit_count,),
        "favorite_count": (Place.favorite_count,),
        "checkin_count": (Place.checkin_count,),
        "popularity": (Place.visit_count, Place.favorite_count),
    }

    def filter_conditions(self, filters: PlaceFilters) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if filters.region_id:
            conditions.append(Place.region_id == filters.region_id)
        if filters.category:
            conditions.append(Place.category == filters.category)
        if filters.status:
            conditions.append(Place.status == filters.status)
        if filters.created_by:
            conditions.append(Place.created_by == filters.created_by)
        if filters.keyword and filters.keyword != "*":
            conditions.append(Place.name.icontains(filters.keyword, autoescape=True))
        if filters.tags:
            conditions.append(Place.tags.overlap(filters.tags))
        return conditions

    async def increment_checkin_count(self, place_id: str) -> None:
        stmt = (
            update(Place)
            .where(Place.id == place_id)
            .values(checkin_count=Place.checkin_count + 1)
        )
        try:
            await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update checkin count for place {place_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to update checkin count for place {place_id}") from e

    async def update_average_rating(self, place_id: str, average_rating: float | None) -> None:
        stmt = update(Place).where(Place.id == place_id).values(average_rating=average_rating)
        try:
            await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update rating for place {place_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to update rating for place {place_id}") from e
