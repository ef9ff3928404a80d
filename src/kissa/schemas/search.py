"""Pydantic schemas shared by list and search endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DISTANCE_SORT_FIELD = "distance"

SortDirection = Literal["asc", "desc"]


class SortSpec(BaseModel):
    """Requested ordering. The field name is resolved to a column by each repository."""

    model_config = ConfigDict(frozen=True)

    field: str = "created_at"
    direction: SortDirection = "desc"

    @property
    def by_distance(self) -> bool:
        return self.field == DISTANCE_SORT_FIELD


class PageRequest(BaseModel):
    """1-based page number and page size."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
