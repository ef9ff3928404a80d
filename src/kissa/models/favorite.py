"""Favorite models: a user's bookmarked places and regions."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from kissa.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class PlaceFavorite(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "place_favorites"
    __table_args__ = (UniqueConstraint("user_id", "place_id", name="uq_place_favorite"),)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    place_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("places.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<PlaceFavorite(user_id={self.user_id!r}, place_id={self.place_id!r})>"


class RegionFavorite(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "region_favorites"
    __table_args__ = (UniqueConstraint("user_id", "region_id", name="uq_region_favorite"),)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    region_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("regions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<RegionFavorite(user_id={self.user_id!r}, region_id={self.region_id!r})>"
