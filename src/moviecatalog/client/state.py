"""In-memory catalog state: movie list, lookups, filters and the edit form.

The state never applies a mutation locally. After every successful create,
update or delete it re-fetches the whole movie list, so what it holds is
always a server-confirmed snapshot.
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields
from typing import Any

from moviecatalog.client.api import CatalogClient, CatalogClientError
from moviecatalog.services.validation import (
    MAX_DURATION,
    MAX_RATING,
    MIN_DURATION,
    MIN_RATING,
    is_valid_year,
    parse_int,
    parse_number,
)
from moviecatalog.utils.text import contains_ignore_case

logger = logging.getLogger(__name__)

Movie = dict[str, Any]
ConfirmCallback = Callable[[str], bool]


@dataclass
class FilterCriteria:
    """Client-side filters. An empty field always matches."""

    title: str = ""
    genre_id: Any = ""
    year: Any = ""

    def is_empty(self) -> bool:
        return not (self.title or self.genre_id or self.year)

    def matches(self, movie: Movie) -> bool:
        if self.title and not contains_ignore_case(movie.get("titulo"), self.title):
            return False
        if self.genre_id and str(movie.get("id_genero")) != str(self.genre_id).strip():
            return False
        if self.year and str(movie.get("año_lanzamiento")) != str(self.year).strip():
            return False
        return True


@dataclass
class MovieForm:
    """
    Draft movie being created or edited.

    Values are kept as entered (usually text); the API parses numbers.
    Attribute names are the request's wire field names.
    """

    titulo: Any = ""
    anio: Any = ""
    duracion: Any = ""
    sinopsis: Any = ""
    calificacion: Any = ""
    id_genero: Any = ""
    id_director: Any = ""
    poster_url: Any = ""

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieForm":
        """Copy a listed movie row into a form draft."""
        return cls(
            titulo=movie["titulo"],
            anio=movie["año_lanzamiento"],
            duracion=movie["duracion_minutos"],
            sinopsis=movie.get("sinopsis") or "",
            calificacion=movie["calificacion"],
            id_genero=movie["id_genero"],
            id_director=movie["id_director"],
            poster_url=movie.get("poster_url") or "",
        )

    def to_payload(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["año"] = payload.pop("anio")
        return payload

    def validate(self) -> str | None:
        """
        Check the draft before any request is made.

        Mirrors the API's numeric range checks so the user gets feedback
        without a round trip.

        Returns:
            The first problem found, or None if the draft can be submitted
        """
        if not str(self.titulo).strip():
            return "Title is required"
        if not is_valid_year(parse_int(self.anio)):
            return "Invalid year"
        duration = parse_int(self.duracion)
        if duration is None or not MIN_DURATION <= duration <= MAX_DURATION:
            return "Invalid duration"
        rating = parse_number(self.calificacion)
        if rating is None or not MIN_RATING <= rating <= MAX_RATING:
            return "Invalid rating"
        if not self.id_genero:
            return "Select a genre"
        if not self.id_director:
            return "Select a director"
        return None


class CatalogState:
    """Single source of truth for what the catalog screen shows."""

    def __init__(self, client: CatalogClient) -> None:
        self.client = client

        self.movies: list[Movie] = []
        self.genres: list[dict[str, Any]] = []
        self.directors: list[dict[str, Any]] = []
        self.filters = FilterCriteria()
        self.filtered_movies: list[Movie] = []

        self.form = MovieForm()
        self.editing_id: int | None = None
        self.show_form = False

        self.loading = False
        self.error = ""
        self.success = ""

    # ------------------------------------------------------------------
    # Loading and filtering
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """
        Fetch movies, genres and directors together.

        State is populated only if all three succeed. Otherwise the first
        request to fail is reported, the others are cancelled and the
        lists are emptied.
        """
        self.loading = True
        self.error = ""
        tasks = [
            asyncio.ensure_future(self.client.list_movies()),
            asyncio.ensure_future(self.client.list_genres()),
            asyncio.ensure_future(self.client.list_directors()),
        ]
        try:
            movies, genres, directors = await asyncio.gather(*tasks)
            self.genres = genres
            self.directors = directors
            self._set_movies(movies)
        except CatalogClientError as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.warning(f"Initial load failed: {e.message}")
            self.genres = []
            self.directors = []
            self._set_movies([])
            self.error = e.message
        finally:
            self.loading = False

    async def refresh_movies(self) -> None:
        """Re-fetch the movie list from the server."""
        self._set_movies(await self.client.list_movies())

    def set_filters(self, **changes: Any) -> None:
        """Update one or more filter fields (title, genre_id, year)."""
        for name, value in changes.items():
            if name not in {f.name for f in fields(FilterCriteria)}:
                raise TypeError(f"Unknown filter: {name}")
            setattr(self.filters, name, value)
        self._apply_filters()

    def clear_filters(self) -> None:
        self.filters = FilterCriteria()
        self._apply_filters()

    @property
    def visible_count(self) -> int:
        return len(self.movies) if self.filters.is_empty() else len(self.filtered_movies)

    def _set_movies(self, movies: list[Movie]) -> None:
        self.movies = movies
        self._apply_filters()

    def _apply_filters(self) -> None:
        if self.filters.is_empty():
            self.filtered_movies = self.movies
        else:
            self.filtered_movies = [m for m in self.movies if self.filters.matches(m)]

    # ------------------------------------------------------------------
    # Form and edit mode
    # ------------------------------------------------------------------

    def open_form(self) -> None:
        self.show_form = True

    def update_form(self, **values: Any) -> None:
        """Set draft fields by wire name; ``año`` is accepted as ``anio``."""
        if "año" in values:
            values["anio"] = values.pop("año")
        for name, value in values.items():
            if name not in {f.name for f in fields(MovieForm)}:
                raise TypeError(f"Unknown form field: {name}")
            setattr(self.form, name, value)

    def start_edit(self, movie: Movie) -> None:
        """Load a movie into the form and switch to edit mode."""
        self.form = MovieForm.from_movie(movie)
        self.editing_id = movie["id_pelicula"]
        self.show_form = True

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.form = MovieForm()
        self.show_form = False

    async def submit(self) -> bool:
        """
        Create or update the movie in the form.

        Updates when an edit target is set, creates otherwise. On success
        the form is reset and the movie list re-fetched.

        Returns:
            True if the server accepted the change
        """
        validation_error = self.form.validate()
        if validation_error:
            self.error = validation_error
            return False

        self.loading = True
        self.error = ""
        title = str(self.form.titulo)
        try:
            if self.editing_id is not None:
                await self.client.update_movie(self.editing_id, self.form.to_payload())
                self.success = f'Movie "{title}" updated'
            else:
                new_id = await self.client.create_movie(self.form.to_payload())
                self.success = f'Movie "{title}" added with ID {new_id}'

            self.cancel_edit()
            await self.refresh_movies()
            return True
        except CatalogClientError as e:
            self.error = e.message
            return False
        finally:
            self.loading = False

    async def delete(self, movie_id: int, title: str, confirm: ConfirmCallback) -> bool:
        """
        Delete a movie after the user confirms.

        Args:
            movie_id: Identifier of the movie to delete
            title: Title shown in the confirmation prompt
            confirm: Called with the prompt; must return True to proceed

        Returns:
            True if the movie was deleted
        """
        if not confirm(f'Delete "{title}"?'):
            return False

        self.loading = True
        self.error = ""
        try:
            await self.client.delete_movie(movie_id)
            self.success = f'Movie "{title}" deleted'
            await self.refresh_movies()
            return True
        except CatalogClientError as e:
            self.error = e.message
            return False
        finally:
            self.loading = False
