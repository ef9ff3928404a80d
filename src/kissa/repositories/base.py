"""Shared query building for searchable entity repositories."""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import RepositoryError
from kissa.models.base import Base
from kissa.schemas.search import SortSpec
from kissa.utils.geo import BoundingBox

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
FiltersT = TypeVar("FiltersT")


class SearchableRepository(Generic[ModelT, FiltersT]):
    """
    Base repository for entities that carry latitude/longitude columns.

    Subclasses set `model`, `sort_columns` and implement `filter_conditions`.
    Sort fields are resolved through `sort_columns`; unknown fields (including
    "distance", which only the proximity search understands) fall back to
    `default_sort_field`.
    """

    model: ClassVar[type[Base]]
    sort_columns: ClassVar[dict[str, tuple[Any, ...]]]
    default_sort_field: ClassVar[str] = "created_at"

    def __init__(self, db: AsyncSession):
        self.db = db

    def filter_conditions(self, filters: FiltersT) -> list[ColumnElement[bool]]:
        raise NotImplementedError

    def bounding_box_condition(self, box: BoundingBox) -> list[ColumnElement[bool]]:
        return [
            self.model.latitude.is_not(None),
            self.model.longitude.is_not(None),
            self.model.latitude.between(box.min_lat, box.max_lat),
            self.model.longitude.between(box.min_lng, box.max_lng),
        ]

    def order_by(self, sort: SortSpec) -> list[Any]:
        columns = self.sort_columns.get(sort.field)
        if columns is None:
            columns = self.sort_columns[self.default_sort_field]
        ordered = [col.asc() if sort.direction == "asc" else col.desc() for col in columns]
        # Tiebreak so identical queries always page the same way
        ordered.append(self.model.id.asc())
        return ordered

    def build_query(
        self,
        filters: FiltersT,
        *,
        sort: SortSpec,
        bounding_box: BoundingBox | None = None,
    ) -> tuple[Select, Select]:
        """Return (rows statement, count statement) sharing the same WHERE clause."""
        conditions = self.filter_conditions(filters)
        if bounding_box is not None:
            conditions.extend(self.bounding_box_condition(bounding_box))

        stmt = select(self.model).where(*conditions).order_by(*self.order_by(sort))
        count_stmt = select(func.count()).select_from(self.model).where(*conditions)
        return stmt, count_stmt

    async def fetch(
        self,
        filters: FiltersT,
        *,
        sort: SortSpec,
        bounding_box: BoundingBox | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> tuple[list[ModelT], int]:
        """
        Fetch rows matching filters (and optionally a bounding box).

        Args:
            filters: Entity-specific filter object
            sort: Requested ordering
            bounding_box: Optional coarse location predicate
            offset: Rows to skip, None for no offset
            limit: Maximum rows to return, None for no limit

        Returns:
            (rows, count) where count is the total number of matches before
            offset/limit are applied

        Raises:
            RepositoryError: If the query fails
        """
        stmt, count_stmt = self.build_query(filters, sort=sort, bounding_box=bounding_box)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            result = await self.db.execute(stmt)
            rows = list(result.scalars().all())
            count_result = await self.db.execute(count_stmt)
            count = count_result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch {self.model.__tablename__}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to fetch {self.model.__tablename__}") from e

        return rows, count

    async def get(self, entity_id: str) -> ModelT | None:
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == entity_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load {self.model.__tablename__} {entity_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to load {self.model.__tablename__} {entity_id}") from e
