"""Favorite persistence and the favorite_count counters it maintains."""

import logging
from typing import Any, ClassVar

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import RepositoryError
from kissa.models.base import Base
from kissa.models.favorite import PlaceFavorite, RegionFavorite
from kissa.models.place import Place
from kissa.models.region import Region

logger = logging.getLogger(__name__)


class FavoriteRepository:
    """
    Base repository for one kind of favorite.

    Subclasses set `model` (the favorite row), `target` (the favorited entity),
    `target_column` (the favorite's foreign key to it) and a `label` for log messages.
    """

    model: ClassVar[type[Base]]
    target: ClassVar[type[Base]]
    target_column: ClassVar[str]
    label: ClassVar[str]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def target_id_column(self) -> Any:
        return getattr(self.model, self.target_column)

    async def find(self, user_id: str, target_id: str) -> Any | None:
        stmt = select(self.model).where(
            self.model.user_id == user_id,
            self.target_id_column == target_id,
        )
        try:
            result = await self.db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load {self.label} favorite {user_id}/{target_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to load {self.label} favorite") from e

    async def add(self, user_id: str, target_id: str) -> Any:
        favorite = self.model(user_id=user_id, **{self.target_column: target_id})
        try:
            self.db.add(favorite)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to add {self.label} favorite {user_id}/{target_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to add {self.label} favorite") from e
        return favorite

    async def remove(self, favorite: Any) -> None:
        try:
            await self.db.delete(favorite)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to remove {self.label} favorite {favorite.id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to remove {self.label} favorite") from e

    async def refresh_count(self, target_id: str) -> int:
        """Recount favorites of target_id, store it on the target and return it."""
        counted = (
            select(func.count())
            .select_from(self.model)
            .where(self.target_id_column == target_id)
            .scalar_subquery()
        )
        stmt = (
            update(self.target)
            .where(self.target.id == target_id)
            .values(favorite_count=counted)
            .returning(self.target.favorite_count)
        )
        try:
            result = await self.db.execute(stmt)
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Failed to refresh favorite count for {self.label} {target_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to refresh favorite count for {self.label} {target_id}") from e

    async def list_for_user(self, user_id: str, limit: int) -> list[Any]:
        """Favorited targets of a user, most recently favorited first."""
        stmt = (
            select(self.target)
            .join(self.model, self.target_id_column == self.target.id)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.target.id.asc())
            .limit(limit)
        )
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to list favorite {self.label}s for {user_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to list favorite {self.label}s for {user_id}") from e


class PlaceFavoriteRepository(FavoriteRepository):
    model = PlaceFavorite
    target = Place
    target_column = "place_id"
    label = "place"


class RegionFavoriteRepository(FavoriteRepository):
    model = RegionFavorite
    target = Region
    target_column = "region_id"
    label = "region"
