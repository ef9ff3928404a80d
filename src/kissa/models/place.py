"""Place model for storing point-of-interest information."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kissa.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from kissa.models.checkin import Checkin
    from kissa.models.region import Region

PLACE_STATUSES = ("draft", "published", "archived")

PLACE_CATEGORIES = (
    "restaurant",
    "cafe",
    "hotel",
    "shopping",
    "entertainment",
    "culture",
    "nature",
    "historical",
    "religious",
    "transportation",
    "hospital",
    "education",
    "office",
    "other",
)


class Place(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Place model.

    Every place has a registered location; check-ins are geofenced against it.
    """

    __tablename__ = "places"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    category: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    region_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("regions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    website: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft", index=True)
    created_by: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    tags: Mapped[list[str]] = mapped_column(ARRAY(String(50)), nullable=False, default=list)

    # Counters and aggregates
    visit_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    favorite_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    checkin_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_rating: Mapped[float | None] = mapped_column(Float, nullable=True)

    # Relationships
    region: Mapped["Region"] = relationship(back_populates="places")
    checkins: Mapped[list["Checkin"]] = relationship(
        back_populates="place",
        cascade="all, delete-orphan",
    )

    @property
    def is_published(self) -> bool:
        return self.status == "published"

    def __repr__(self) -> str:
        return f"<Place(id={self.id!r}, name={self.name!r}, category={self.category!r})>"
