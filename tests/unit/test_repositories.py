"""Unit tests for query building and error handling in repositories."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import SQLAlchemyError

from kissa.errors import RepositoryError
from kissa.models.place import Place
from kissa.repositories.checkin import CheckinRepository, UserRepository
from kissa.repositories.place import PlaceRepository
from kissa.repositories.region import RegionRepository
from kissa.schemas.geo import Coordinate
from kissa.schemas.place import PlaceFilters
from kissa.schemas.region import RegionFilters
from kissa.schemas.search import SortSpec
from kissa.utils.geo import calculate_bounding_box


def compile_pg(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def rows_and_count(rows: list, count: int) -> list[MagicMock]:
    rows_result = MagicMock()
    rows_result.scalars.return_value.all.return_value = rows
    count_result = MagicMock()
    count_result.scalar_one.return_value = count
    return [rows_result, count_result]


BOX = calculate_bounding_box(Coordinate(latitude=35.0, longitude=135.0), 5)


class TestPlaceQueries:
    def test_bounding_box_adds_coordinate_ranges(self):
        stmt, count_stmt = PlaceRepository(AsyncMock()).build_query(
            PlaceFilters(), sort=SortSpec(), bounding_box=BOX
        )
        for compiled in (compile_pg(stmt), compile_pg(count_stmt)):
            assert "places.latitude IS NOT NULL" in compiled
            assert "places.longitude IS NOT NULL" in compiled
            assert "places.latitude BETWEEN" in compiled
            assert "places.longitude BETWEEN" in compiled

    def test_no_coordinate_predicate_without_box(self):
        stmt, _ = PlaceRepository(AsyncMock()).build_query(PlaceFilters(), sort=SortSpec())
        assert "BETWEEN" not in compile_pg(stmt)

    def test_bounding_box_bounds_are_bound(self):
        stmt, _ = PlaceRepository(AsyncMock()).build_query(
            PlaceFilters(), sort=SortSpec(), bounding_box=BOX
        )
        params = stmt.compile(dialect=postgresql.dialect()).params
        assert BOX.min_lat in params.values()
        assert BOX.max_lng in params.values()

    def test_filters_combine_with_box(self):
        filters = PlaceFilters(region_id="kyoto", category="cafe", status="published", keyword="kissa")
        stmt, _ = PlaceRepository(AsyncMock()).build_query(filters, sort=SortSpec(), bounding_box=BOX)
        compiled = compile_pg(stmt)
        assert "places.region_id =" in compiled
        assert "places.category =" in compiled
        assert "places.status =" in compiled
        assert "LIKE" in compiled
        assert "places.name" in compiled
        assert "places.latitude BETWEEN" in compiled

    def test_keyword_is_substring_match(self):
        conditions = PlaceRepository(AsyncMock()).filter_conditions(PlaceFilters(keyword="kissa"))
        compiled = conditions[0].compile(dialect=postgresql.dialect())
        assert "LIKE" in str(compiled)
        assert list(compiled.params.values()) == ["kissa"]

    @pytest.mark.parametrize(
        "keyword, bound",
        [("100%", "100/%"), ("cafe_bar", "cafe/_bar"), ("a/b", "a//b")],
    )
    def test_keyword_wildcards_are_literal(self, keyword, bound):
        conditions = PlaceRepository(AsyncMock()).filter_conditions(PlaceFilters(keyword=keyword))
        compiled = conditions[0].compile(dialect=postgresql.dialect())
        assert "ESCAPE '/'" in str(compiled)
        assert list(compiled.params.values()) == [bound]

    def test_region_keyword_wildcards_are_literal(self):
        conditions = RegionRepository(AsyncMock()).filter_conditions(RegionFilters(keyword="50%"))
        assert list(conditions[0].compile(dialect=postgresql.dialect()).params.values()) == ["50/%"]

    def test_wildcard_keyword_matches_everything(self):
        assert PlaceRepository(AsyncMock()).filter_conditions(PlaceFilters(keyword="*")) == []

    def test_tags_use_array_overlap(self):
        conditions = PlaceRepository(AsyncMock()).filter_conditions(PlaceFilters(tags=["retro"]))
        assert len(conditions) == 1
        assert "&&" in str(conditions[0].compile(dialect=postgresql.dialect()))


class TestOrdering:
    @pytest.mark.parametrize("field", ["distance", "no_such_column"])
    def test_unknown_fields_fall_back_to_created_at(self, field):
        order = PlaceRepository(AsyncMock()).order_by(SortSpec(field=field, direction="desc"))
        assert [str(clause) for clause in order] == ["places.created_at DESC", "places.id ASC"]

    def test_direction_applies(self):
        order = PlaceRepository(AsyncMock()).order_by(SortSpec(field="name", direction="asc"))
        assert [str(clause) for clause in order] == ["places.name ASC", "places.id ASC"]

    def test_popularity_orders_by_visits_then_favorites(self):
        order = RegionRepository(AsyncMock()).order_by(SortSpec(field="popularity", direction="desc"))
        assert [str(clause) for clause in order] == [
            "regions.visit_count DESC",
            "regions.favorite_count DESC",
            "regions.id ASC",
        ]

    def test_regions_cannot_sort_by_checkin_count(self):
        order = RegionRepository(AsyncMock()).order_by(SortSpec(field="checkin_count"))
        assert str(order[0]) == "regions.created_at DESC"


class TestFetch:
    async def test_returns_rows_and_total(self):
        place = Place(id="p1", name="Coffee Tei")
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=rows_and_count([place], 12))

        rows, count = await PlaceRepository(db).fetch(PlaceFilters(), sort=SortSpec(), offset=10, limit=1)

        assert rows == [place]
        assert count == 12
        rows_stmt = compile_pg(db.execute.await_args_list[0].args[0])
        assert "LIMIT" in rows_stmt
        assert "OFFSET" in rows_stmt
        assert "count(*)" in compile_pg(db.execute.await_args_list[1].args[0])

    async def test_no_limit_when_not_requested(self):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=rows_and_count([], 0))

        await RegionRepository(db).fetch(RegionFilters(), sort=SortSpec(), offset=0)

        rows_stmt = compile_pg(db.execute.await_args_list[0].args[0])
        assert "LIMIT" not in rows_stmt
        assert "OFFSET" not in rows_stmt

    async def test_database_error_wrapped(self):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("connection refused"))

        with pytest.raises(RepositoryError) as exc_info:
            await PlaceRepository(db).fetch(PlaceFilters(), sort=SortSpec())

        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

    async def test_get_returns_none_when_missing(self):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        assert await RegionRepository(db).get("missing") is None

    async def test_get_wraps_database_error(self):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("timeout"))

        with pytest.raises(RepositoryError):
            await UserRepository(db).get("user-1")


class TestCheckinRepository:
    async def test_average_rating_converted_to_float(self):
        result = MagicMock()
        result.scalar_one_or_none.return_value = Decimal("4.25")
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        average = await CheckinRepository(db).average_rating_for_place("p1")

        assert average == 4.25
        assert isinstance(average, float)
        compiled = compile_pg(db.execute.await_args.args[0])
        assert "avg(checkins.rating)" in compiled
        assert "checkins.rating IS NOT NULL" in compiled

    async def test_average_rating_none_without_ratings(self):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        assert await CheckinRepository(db).average_rating_for_place("p1") is None

    async def test_get_wraps_database_error(self):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("boom"))

        with pytest.raises(RepositoryError):
            await CheckinRepository(db).get("c1")

    async def test_user_listing_hides_private_by_default(self):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        await CheckinRepository(db).list_for_user("user-1", 20)

        compiled = compile_pg(db.execute.await_args.args[0])
        assert "checkins.user_id = " in compiled
        assert "checkins.is_private is false" in compiled.lower()
        assert "ORDER BY checkins.created_at DESC, checkins.id ASC" in compiled
        assert "LIMIT" in compiled

    async def test_user_listing_can_include_private(self):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        await CheckinRepository(db).list_for_user("user-1", 20, include_private=True)

        assert "is_private is false" not in compile_pg(db.execute.await_args.args[0]).lower()

    async def test_place_listing_is_public_active_only(self):
        result = MagicMock()
        result.scalars.return_value.all.return_value = ["c1"]
        db = AsyncMock()
        db.execute = AsyncMock(return_value=result)

        assert await CheckinRepository(db).list_for_place("p1", 5) == ["c1"]

        compiled = compile_pg(db.execute.await_args.args[0])
        assert "checkins.place_id = " in compiled
        assert "checkins.status = " in compiled
        assert "checkins.is_private is false" in compiled.lower()

    async def test_listing_wraps_database_error(self):
        db = AsyncMock()
        db.execute = AsyncMock(side_effect=SQLAlchemyError("boom"))

        with pytest.raises(RepositoryError):
            await CheckinRepository(db).list_for_place("p1", 5)
