"""Per-user listings: check-ins and favorites."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.database import get_db
from kissa.errors import RepositoryError, UserNotFoundError
from kissa.schemas.checkin import CheckinResponse
from kissa.schemas.place import PlaceResponse
from kissa.schemas.region import RegionResponse
from kissa.services.checkins import list_user_checkins
from kissa.services.favorites import list_favorite_places, list_favorite_regions

router = APIRouter()


@router.get("/users/{user_id}/checkins", response_model=list[CheckinResponse])
async def get_user_checkins(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    viewer_id: str | None = Header(None, alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> list[CheckinResponse]:
    """
    A user's recent check-ins.

    Private check-ins are included only when X-User-Id is the user themself.
    """
    try:
        checkins = await list_user_checkins(db, user_id, limit=limit, viewer_id=viewer_id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load checkins")

    return [CheckinResponse.model_validate(checkin) for checkin in checkins]


@router.get("/users/{user_id}/favorite-places", response_model=list[PlaceResponse])
async def get_favorite_places(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> list[PlaceResponse]:
    try:
        places = await list_favorite_places(db, user_id, limit=limit)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load favorites")

    return [PlaceResponse.model_validate(place) for place in places]


@router.get("/users/{user_id}/favorite-regions", response_model=list[RegionResponse])
async def get_favorite_regions(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> list[RegionResponse]:
    try:
        regions = await list_favorite_regions(db, user_id, limit=limit)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load favorites")

    return [RegionResponse.model_validate(region) for region in regions]
