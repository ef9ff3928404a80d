"""Check-in model: a user's recorded visit to a place."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kissa.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from kissa.models.place import Place
    from kissa.models.user import User

CHECKIN_STATUSES = ("active", "hidden", "reported", "deleted")


class Checkin(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Check-in model.

    Stores the location the user's device reported at check-in time.
    """

    __tablename__ = "checkins"
    __table_args__ = (
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 5)", name="ck_checkin_rating"),
    )

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
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    user_latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    user_longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active", index=True)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    user: Mapped["User"] = relationship(back_populates="checkins")
    place: Mapped["Place"] = relationship(back_populates="checkins")

    def __repr__(self) -> str:
        return f"<Checkin(id={self.id!r}, user_id={self.user_id!r}, place_id={self.place_id!r})>"
