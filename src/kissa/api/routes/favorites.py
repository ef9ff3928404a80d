"""Favorite endpoints for places and regions."""

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from kissa.database import get_db
from kissa.errors import (
    AlreadyFavoritedError,
    NotFavoritedError,
    NotFoundError,
    RepositoryError,
)
from kissa.schemas.favorite import FavoriteStatus
from kissa.services.favorites import (
    add_place_favorite,
    add_region_favorite,
    remove_place_favorite,
    remove_region_favorite,
)

router = APIRouter()


async def _run(action, db: AsyncSession, user_id: str, target_id: str) -> FavoriteStatus:
    try:
        return await action(db, user_id, target_id)
    except (NotFoundError, NotFavoritedError) as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": str(e)})
    except AlreadyFavoritedError as e:
        raise HTTPException(status_code=409, detail={"code": e.code, "message": str(e)})
    except RepositoryError:
        raise HTTPException(status_code=503, detail="Favorite update failed")


@router.post("/places/{place_id}/favorite", response_model=FavoriteStatus, status_code=201)
async def favorite_place(
    place_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    return await _run(add_place_favorite, db, user_id, place_id)


@router.delete("/places/{place_id}/favorite", response_model=FavoriteStatus)
async def unfavorite_place(
    place_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    return await _run(remove_place_favorite, db, user_id, place_id)


@router.post("/regions/{region_id}/favorite", response_model=FavoriteStatus, status_code=201)
async def favorite_region(
    region_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    return await _run(add_region_favorite, db, user_id, region_id)


@router.delete("/regions/{region_id}/favorite", response_model=FavoriteStatus)
async def unfavorite_region(
    region_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    db: AsyncSession = Depends(get_db),
) -> FavoriteStatus:
    return await _run(remove_region_favorite, db, user_id, region_id)
