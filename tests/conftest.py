"""Shared test fixtures."""

from typing import Any

import pytest
from fastapi import FastAPI

from moviecatalog.api.dependencies import get_gateway
from moviecatalog.api.errors import register_exception_handlers
from moviecatalog.api.routes import health, lookups, movies, technologies
from moviecatalog.exceptions import GatewayError, ReferentialIntegrityError
from moviecatalog.models import Director, Genre
from moviecatalog.schemas.movie import MovieWrite


class FakeGateway:
    """
    In-memory stand-in for the database gateway.

    Behaves like the view and stored procedures: joined names on reads,
    missing genre/director rejected on writes, affected-row counts on
    update and delete.
    """

    def __init__(self) -> None:
        self.genres = {1: "Science Fiction", 2: "Drama", 3: "Animation"}
        self.directors = {1: ("Christopher", "Nolan"), 2: ("Greta", "Gerwig")}
        self.rows: dict[int, dict[str, Any]] = {}
        self.next_id = 1
        self.fail = False

    def add(self, **fields: Any) -> int:
        movie = MovieWrite(
            title=fields.get("title", "Interstellar"),
            release_year=fields.get("release_year", 2014),
            duration_minutes=fields.get("duration_minutes", 169),
            synopsis=fields.get("synopsis"),
            rating=fields.get("rating", 8.7),
            genre_id=fields.get("genre_id", 1),
            director_id=fields.get("director_id", 1),
            poster_url=fields.get("poster_url"),
        )
        return self._store(self.next_id, movie, new=True)

    def _check(self) -> None:
        if self.fail:
            raise GatewayError()

    def _store(self, movie_id: int, movie: MovieWrite, new: bool = False) -> int:
        if movie.genre_id not in self.genres or movie.director_id not in self.directors:
            raise ReferentialIntegrityError()
        first, last = self.directors[movie.director_id]
        self.rows[movie_id] = {
            "id_pelicula": movie_id,
            "titulo": movie.title,
            "año_lanzamiento": movie.release_year,
            "duracion_minutos": movie.duration_minutes,
            "sinopsis": movie.synopsis,
            "calificacion": movie.rating,
            "id_genero": movie.genre_id,
            "genero": self.genres[movie.genre_id],
            "id_director": movie.director_id,
            "director": f"{first} {last}",
            "poster_url": movie.poster_url,
        }
        if new:
            self.next_id += 1
        return movie_id

    async def list_movies(self) -> list[dict[str, Any]]:
        self._check()
        return sorted(self.rows.values(), key=lambda row: row["titulo"])

    async def search_movies(self, title=None, genre_id=None, year=None) -> list[dict[str, Any]]:
        self._check()
        return [
            row
            for row in await self.list_movies()
            if (title is None or title.lower() in row["titulo"].lower())
            and (genre_id is None or row["id_genero"] == genre_id)
            and (year is None or row["año_lanzamiento"] == year)
        ]

    async def insert_movie(self, movie: MovieWrite) -> int:
        self._check()
        return self._store(self.next_id, movie, new=True)

    async def update_movie(self, movie_id: int, movie: MovieWrite) -> int:
        self._check()
        if movie_id not in self.rows:
            return 0
        self._store(movie_id, movie)
        return 1

    async def delete_movie(self, movie_id: int) -> int:
        self._check()
        return 1 if self.rows.pop(movie_id, None) else 0

    async def list_genres(self) -> list[Genre]:
        self._check()
        genres = [Genre(id=genre_id, name=name) for genre_id, name in self.genres.items()]
        return sorted(genres, key=lambda g: g.name)

    async def list_directors(self) -> list[Director]:
        self._check()
        directors = [
            Director(id=director_id, first_name=first, last_name=last)
            for director_id, (first, last) in self.directors.items()
        ]
        return sorted(directors, key=lambda d: (d.first_name, d.last_name))


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def test_app(fake_gateway: FakeGateway) -> FastAPI:
    """Minimal FastAPI app without the lifespan, backed by the fake gateway."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.include_router(technologies.router, prefix="/api")
    app.include_router(lookups.router, prefix="/api")
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    return app
