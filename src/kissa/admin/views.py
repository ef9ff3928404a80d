"""SQLAdmin model views."""

from sqladmin import ModelView

from kissa.models.checkin import Checkin
from kissa.models.place import Place
from kissa.models.region import Region
from kissa.models.user import User


class RegionAdmin(ModelView, model=Region):
    column_list = [
        Region.id,
        Region.name,
        Region.status,
        Region.latitude,
        Region.longitude,
        Region.place_count,
    ]
    column_searchable_list = [Region.name]
    column_sortable_list = [Region.name, Region.status, Region.created_at]


class PlaceAdmin(ModelView, model=Place):
    column_list = [
        Place.id,
        Place.name,
        Place.category,
        Place.status,
        Place.region_id,
        Place.latitude,
        Place.longitude,
        Place.checkin_count,
    ]
    column_searchable_list = [Place.name, Place.address]
    column_sortable_list = [Place.name, Place.category, Place.checkin_count]


class CheckinAdmin(ModelView, model=Checkin):
    column_list = [
        Checkin.id,
        Checkin.user_id,
        Checkin.place_id,
        Checkin.rating,
        Checkin.status,
        Checkin.created_at,
    ]
    column_searchable_list = [Checkin.place_id, Checkin.user_id]
    # Check-ins are created through the geofenced API only
    can_create = False


class UserAdmin(ModelView, model=User):
    column_list = [User.id, User.name, User.email, User.status]
    column_searchable_list = [User.name, User.email]
    column_sortable_list = [User.name, User.status]


ADMIN_VIEWS = [RegionAdmin, PlaceAdmin, CheckinAdmin, UserAdmin]
