"""Seed script to populate the genre and director lookups."""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.database import AsyncSessionLocal
from moviecatalog.models import Director, Genre

GENRES = [
    "Action",
    "Animation",
    "Comedy",
    "Documentary",
    "Drama",
    "Horror",
    "Romance",
    "Science Fiction",
    "Thriller",
]

DIRECTORS = [
    ("Christopher", "Nolan"),
    ("Guillermo", "del Toro"),
    ("Alfonso", "Cuarón"),
    ("Greta", "Gerwig"),
    ("Hayao", "Miyazaki"),
    ("Denis", "Villeneuve"),
]


async def seed_genres(session: AsyncSession) -> int:
    """Add missing genres; returns how many were added."""
    result = await session.execute(select(Genre.name))
    existing = set(result.scalars().all())

    added = 0
    for name in GENRES:
        if name in existing:
            print(f"Genre {name} already exists, skipping")
            continue
        session.add(Genre(name=name))
        print(f"Added genre: {name}")
        added += 1
    return added


async def seed_directors(session: AsyncSession) -> int:
    """Add missing directors; returns how many were added."""
    result = await session.execute(select(Director.first_name, Director.last_name))
    existing = {tuple(row) for row in result.all()}

    added = 0
    for first_name, last_name in DIRECTORS:
        if (first_name, last_name) in existing:
            print(f"Director {first_name} {last_name} already exists, skipping")
            continue
        session.add(Director(first_name=first_name, last_name=last_name))
        print(f"Added director: {first_name} {last_name}")
        added += 1
    return added


async def seed_catalog() -> None:
    """Seed the database with lookup data."""
    async with AsyncSessionLocal() as session:
        await seed_genres(session)
        await seed_directors(session)
        await session.commit()
        print("Catalog seeding complete")


def main() -> None:
    asyncio.run(seed_catalog())


if __name__ == "__main__":
    main()
