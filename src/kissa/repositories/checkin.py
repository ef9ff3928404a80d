"""Check-in and user persistence."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.errors import RepositoryError
from kissa.models.checkin import Checkin
from kissa.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load user {user_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to load user {user_id}") from e


class CheckinRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, checkin_id: str) -> Checkin | None:
        try:
            result = await self.db.execute(select(Checkin).where(Checkin.id == checkin_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load checkin {checkin_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to load checkin {checkin_id}") from e

    async def create(self, checkin: Checkin) -> Checkin:
        """Add a check-in and flush so its id is assigned."""
        try:
            self.db.add(checkin)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to create checkin for place {checkin.place_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to create checkin for place {checkin.place_id}") from e
        return checkin

    async def average_rating_for_place(self, place_id: str) -> float | None:
        """Mean rating over active, rated check-ins of a place."""
        stmt = select(func.avg(Checkin.rating)).where(
            Checkin.place_id == place_id,
            Checkin.status == "active",
            Checkin.rating.is_not(None),
        )
        try:
            result = await self.db.execute(stmt)
            average = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to compute rating for place {place_id}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to compute rating for place {place_id}") from e
        return float(average) if average is not None else None

    async def list_for_user(
        self, user_id: str, limit: int, include_private: bool = False
    ) -> list[Checkin]:
        """Active check-ins by a user, newest first."""
        conditions = [Checkin.user_id == user_id, Checkin.status == "active"]
        if not include_private:
            conditions.append(Checkin.is_private.is_(False))
        return await self._list(conditions, limit, f"user {user_id}")

    async def list_for_place(self, place_id: str, limit: int) -> list[Checkin]:
        """Active public check-ins at a place, newest first."""
        conditions = [
            Checkin.place_id == place_id,
            Checkin.status == "active",
            Checkin.is_private.is_(False),
        ]
        return await self._list(conditions, limit, f"place {place_id}")

    async def _list(self, conditions: list, limit: int, owner: str) -> list[Checkin]:
        stmt = (
            select(Checkin)
            .where(*conditions)
            .order_by(Checkin.created_at.desc(), Checkin.id.asc())
            .limit(limit)
        )
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to list checkins for {owner}: {e}", exc_info=True)
            raise RepositoryError(f"Failed to list checkins for {owner}") from e
