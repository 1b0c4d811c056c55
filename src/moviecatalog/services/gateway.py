"""Persistence gateway over the catalog database.

Reads go through the vista_peliculas view and the lookup tables; searches
and mutations call the stored procedures. Driver errors are translated
into the catalog error types before they leave this module.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.exceptions import GatewayError, ReferentialIntegrityError
from moviecatalog.models import Director, Genre
from moviecatalog.schemas.movie import MovieWrite

logger = logging.getLogger(__name__)

# MySQL ER_NO_REFERENCED_ROW / ER_NO_REFERENCED_ROW_2
MISSING_REFERENCE_CODES = frozenset({1216, 1452})

LIST_MOVIES = text("SELECT * FROM vista_peliculas ORDER BY titulo")
SEARCH_MOVIES = text("CALL BuscarPeliculas(:titulo, :id_genero, :anio)")
INSERT_MOVIE = text(
    "CALL InsertarPelicula(:titulo, :anio, :duracion, :sinopsis, "
    ":calificacion, :id_genero, :id_director, :poster_url)"
)
UPDATE_MOVIE = text(
    "CALL ActualizarPelicula(:id_pelicula, :titulo, :anio, :duracion, :sinopsis, "
    ":calificacion, :id_genero, :id_director, :poster_url)"
)
DELETE_MOVIE = text("CALL EliminarPelicula(:id_pelicula)")


def is_missing_reference(error: IntegrityError) -> bool:
    """Return True if the driver reported a foreign key pointing nowhere."""
    args = getattr(error.orig, "args", ())
    return bool(args) and args[0] in MISSING_REFERENCE_CODES


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Map SQLAlchemy errors raised inside the block to catalog errors."""
    try:
        yield
    except IntegrityError as e:
        if is_missing_reference(e):
            logger.warning(f"{operation}: referenced genre or director does not exist")
            raise ReferentialIntegrityError() from e
        logger.error(f"{operation} failed: {e}")
        raise GatewayError() from e
    except SQLAlchemyError as e:
        logger.error(f"{operation} failed: {e}")
        raise GatewayError() from e


class CatalogGateway:
    """Catalog queries and mutations bound to one database session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_movies(self) -> list[dict[str, Any]]:
        """All movies with genre and director names, ordered by title."""
        with translate_errors("List movies"):
            result = await self.session.execute(LIST_MOVIES)
            return [dict(row) for row in result.mappings().all()]

    async def search_movies(
        self,
        title: str | None = None,
        genre_id: int | None = None,
        year: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Search movies with the BuscarPeliculas procedure.

        Matching is entirely up to the procedure; a None filter is passed
        as NULL and means "any".

        Returns:
            The first result set produced by the procedure
        """
        params = {"titulo": title, "id_genero": genre_id, "anio": year}
        with translate_errors("Search movies"):
            result = await self.session.execute(SEARCH_MOVIES, params)
            return [dict(row) for row in result.mappings().all()]

    async def insert_movie(self, movie: MovieWrite) -> int:
        """
        Insert a movie and return the identifier the database assigned.

        Raises:
            ReferentialIntegrityError: If the genre or director does not exist
            GatewayError: On any other database failure
        """
        with translate_errors("Insert movie"):
            result = await self.session.execute(INSERT_MOVIE, movie.procedure_params())
            row = result.mappings().one()
            await self.session.commit()

        new_id = int(row["nuevo_id"])
        logger.info(f"Inserted movie {new_id}: {movie.title!r}")
        return new_id

    async def update_movie(self, movie_id: int, movie: MovieWrite) -> int:
        """
        Replace every field of a movie.

        Returns:
            Number of rows the procedure reports as affected; 0 when no
            movie has ``movie_id``
        """
        params = {"id_pelicula": movie_id, **movie.procedure_params()}
        with translate_errors("Update movie"):
            result = await self.session.execute(UPDATE_MOVIE, params)
            row = result.mappings().one()
            await self.session.commit()

        affected = int(row["filas_afectadas"])
        logger.info(f"Updated movie {movie_id}: {affected} row(s) affected")
        return affected

    async def delete_movie(self, movie_id: int) -> int:
        """Delete a movie and return the number of rows removed."""
        with translate_errors("Delete movie"):
            result = await self.session.execute(DELETE_MOVIE, {"id_pelicula": movie_id})
            row = result.mappings().one()
            await self.session.commit()

        affected = int(row["filas_afectadas"])
        logger.info(f"Deleted movie {movie_id}: {affected} row(s) affected")
        return affected

    async def list_genres(self) -> list[Genre]:
        with translate_errors("List genres"):
            result = await self.session.execute(select(Genre).order_by(Genre.name))
            return list(result.scalars().all())

    async def list_directors(self) -> list[Director]:
        with translate_errors("List directors"):
            result = await self.session.execute(
                select(Director).order_by(Director.first_name, Director.last_name)
            )
            return list(result.scalars().all())
