"""SQLAlchemy ORM models."""

from kissa.models.base import Base
from kissa.models.checkin import Checkin
from kissa.models.favorite import PlaceFavorite, RegionFavorite
from kissa.models.place import Place
from kissa.models.region import Region
from kissa.models.user import User

__all__ = ["Base", "Checkin", "Place", "PlaceFavorite", "Region", "RegionFavorite", "User"]
