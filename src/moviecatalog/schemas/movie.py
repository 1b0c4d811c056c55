"""Pydantic schemas for movie data."""

from pydantic import BaseModel, ConfigDict, Field


class MovieResponse(BaseModel):
    """
    Movie row as exposed by the vista_peliculas view.

    Field aliases are the view's column names, which are also the JSON
    keys sent to clients.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="id_pelicula")
    title: str = Field(alias="titulo")
    release_year: int = Field(alias="año_lanzamiento")
    duration_minutes: int = Field(alias="duracion_minutos")
    synopsis: str | None = Field(default=None, alias="sinopsis")
    rating: float = Field(alias="calificacion")
    genre_id: int = Field(alias="id_genero")
    genre: str | None = Field(default=None, alias="genero")
    director_id: int = Field(alias="id_director")
    director: str | None = Field(default=None, alias="director")
    poster_url: str | None = Field(default=None, alias="poster_url")


class MovieWrite(BaseModel):
    """Validated and trimmed movie fields, ready for a stored procedure call."""

    title: str
    release_year: int
    duration_minutes: int
    synopsis: str | None = None
    rating: float
    genre_id: int
    director_id: int
    poster_url: str | None = None

    def procedure_params(self) -> dict[str, object]:
        """Bind parameters in the positional order the procedures declare."""
        return {
            "titulo": self.title,
            "anio": self.release_year,
            "duracion": self.duration_minutes,
            "sinopsis": self.synopsis,
            "calificacion": self.rating,
            "id_genero": self.genre_id,
            "id_director": self.director_id,
            "poster_url": self.poster_url,
        }


class SearchParams(BaseModel):
    """Validated search filters; None means the filter is not applied."""

    title: str | None = None
    genre_id: int | None = None
    year: int | None = None


class MovieCreated(BaseModel):
    new_id: int


class RowsAffected(BaseModel):
    affected_rows: int
