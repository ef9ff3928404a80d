"""Seed script to populate sample users, regions and places."""

import asyncio
import logging

from sqlalchemy import select

from kissa.config import settings
from kissa.database import AsyncSessionLocal
from kissa.logging_config import configure_logging
from kissa.models import Place, Region, User

logger = logging.getLogger(__name__)

SEED_USER_ID = "00000000-0000-4000-8000-000000000001"
TOKYO_REGION_ID = "00000000-0000-4000-8000-000000000101"
OSAKA_REGION_ID = "00000000-0000-4000-8000-000000000102"

USERS = [
    {
        "id": SEED_USER_ID,
        "name": "Seed Editor",
        "email": "editor@kissa.example.com",
        "status": "active",
    },
]

REGIONS = [
    {
        "id": TOKYO_REGION_ID,
        "name": "Tokyo",
        "short_description": "Kissaten around central Tokyo",
        "latitude": 35.6762,
        "longitude": 139.6503,
        "status": "published",
        "created_by": SEED_USER_ID,
        "tags": ["tokyo", "kanto"],
    },
    {
        "id": OSAKA_REGION_ID,
        "name": "Osaka",
        "short_description": "Kissaten around Umeda and Namba",
        "latitude": 34.6937,
        "longitude": 135.5023,
        "status": "published",
        "created_by": SEED_USER_ID,
        "tags": ["osaka", "kansai"],
    },
]

PLACES = [
    {
        "id": "00000000-0000-4000-8000-000000001001",
        "name": "Cafe de L'Ambre",
        "category": "cafe",
        "region_id": TOKYO_REGION_ID,
        "latitude": 35.6684,
        "longitude": 139.7649,
        "address": "8-10-15 Ginza, Chuo-ku, Tokyo",
        "status": "published",
        "created_by": SEED_USER_ID,
        "tags": ["coffee", "ginza"],
    },
    {
        "id": "00000000-0000-4000-8000-000000001002",
        "name": "Coffee Tei",
        "category": "cafe",
        "region_id": TOKYO_REGION_ID,
        "latitude": 35.6994,
        "longitude": 139.6364,
        "address": "2-30-3 Asagaya-minami, Suginami-ku, Tokyo",
        "status": "published",
        "created_by": SEED_USER_ID,
        "tags": ["coffee", "asagaya"],
    },
    {
        "id": "00000000-0000-4000-8000-000000001003",
        "name": "Marufuku Coffee",
        "category": "cafe",
        "region_id": OSAKA_REGION_ID,
        "latitude": 34.6666,
        "longitude": 135.5021,
        "address": "1-9-1 Sennichimae, Chuo-ku, Osaka",
        "status": "published",
        "created_by": SEED_USER_ID,
        "tags": ["coffee", "namba"],
    },
]


async def _seed(session, model, rows: list[dict]) -> int:
    created = 0
    for row in rows:
        result = await session.execute(select(model).where(model.id == row["id"]))
        if result.scalar_one_or_none():
            logger.info(f"{model.__name__} {row['id']} already exists, skipping")
            continue
        session.add(model(**row))
        created += 1
        logger.info(f"Added {model.__name__}: {row.get('name')}")
    # Later tables reference earlier ones
    await session.flush()
    return created


async def seed_places() -> None:
    """Seed the database with sample data. Safe to run repeatedly."""
    async with AsyncSessionLocal() as session:
        await _seed(session, User, USERS)
        await _seed(session, Region, REGIONS)
        await _seed(session, Place, PLACES)
        await session.commit()
    logger.info("Seeding complete")


if __name__ == "__main__":
    configure_logging(settings.log_level)
    asyncio.run(seed_places())
