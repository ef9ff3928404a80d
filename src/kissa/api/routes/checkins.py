"""Check-in API endpoints."""

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.database import get_db
from kissa.errors import (
    CheckinNotFoundError,
    CheckinTooFarError,
    PlaceNotFoundError,
    PlaceNotPublishedError,
    RepositoryError,
    UserInactiveError,
    UserNotFoundError,
)
from kissa.schemas.checkin import CheckinCreate, CheckinResponse
from kissa.services.checkins import create_checkin, get_checkin, list_place_checkins

router = APIRouter()


@router.post("/checkins", response_model=CheckinResponse, status_code=201)
async def post_checkin(
    payload: CheckinCreate,
    user_id: str = Header(..., alias="X-User-Id", description="ID of the user checking in"),
    db: AsyncSession = Depends(get_db),
) -> CheckinResponse:
    """
    Check in to a place.

    The reported user location must be within the configured distance of the
    place; otherwise the request fails with code CHECKIN_TOO_FAR.
    """
    try:
        checkin = await create_checkin(db, user_id, payload)
    except CheckinTooFarError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "code": e.code,
                "message": "You are too far from this place to check in",
                "distance_meters": round(e.distance_meters, 1),
                "max_distance_meters": e.max_distance_meters,
            },
        )
    except (UserNotFoundError, PlaceNotFoundError) as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except UserInactiveError as e:
        raise HTTPException(status_code=403, detail={"code": e.code, "message": str(e)})
    except PlaceNotPublishedError as e:
        raise HTTPException(status_code=409, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Check-in failed")

    return CheckinResponse.model_validate(checkin)


@router.get("/checkins/{checkin_id}", response_model=CheckinResponse)
async def get_checkin_endpoint(
    checkin_id: str,
    viewer_id: str | None = Header(None, alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> CheckinResponse:
    """Fetch one check-in. Private check-ins are only returned to their owner."""
    try:
        checkin = await get_checkin(db, checkin_id, viewer_id=viewer_id)
    except CheckinNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": "Checkin not found"})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load checkin")

    return CheckinResponse.model_validate(checkin)


@router.get("/places/{place_id}/checkins", response_model=list[CheckinResponse])
async def get_place_checkins(
    place_id: str,
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> list[CheckinResponse]:
    """Recent public check-ins at a place."""
    try:
        checkins = await list_place_checkins(db, place_id, limit=limit)
    except PlaceNotFoundError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Failed to load checkins")

    return [CheckinResponse.model_validate(checkin) for checkin in checkins]
