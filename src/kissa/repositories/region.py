"""Region persistence."""

from sqlalchemy import ColumnElement

from kissa.models.region import Region
from kissa.repositories.base import SearchableRepository
from kissa.schemas.region import RegionFilters


class RegionRepository(SearchableRepository[Region, RegionFilters]):
    model = Region
    sort_columns = {
        "name": (Region.name,),
        "created_at": (Region.created_at,),
        "updated_at": (Region.updated_at,),
        "visit_count": (Region.visit_count,),
        "favorite_count": (Region.favorite_count,),
        "popularity": (Region.visit_count, Region.favorite_count),
    }

    def filter_conditions(self, filters: RegionFilters) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if filters.status:
            conditions.append(Region.status == filters.status)
        if filters.created_by:
            conditions.append(Region.created_by == filters.created_by)
        if filters.keyword and filters.keyword != "*":
            conditions.append(Region.name.icontains(filters.keyword, autoescape=True))
        if filters.tags:
            conditions.append(Region.tags.overlap(filters.tags))
        return conditions
