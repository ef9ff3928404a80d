"""Pydantic schemas for favorites."""

from pydantic import BaseModel


class FavoriteStatus(BaseModel):
    """Whether the caller now favorites the target, and the target's new favorite count."""

    favorited: bool
    favorite_count: int
