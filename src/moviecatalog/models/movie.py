"""Movie model mirroring the peliculas table."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviecatalog.models.base import Base

if TYPE_CHECKING:
    from moviecatalog.models.director import Director
    from moviecatalog.models.genre import Genre


class Movie(Base):
    """
    Movie model.

    Writes go through the stored procedures, so the API never inserts
    through this mapping. It exists for the migration metadata, the seed
    script and ad-hoc queries.
    """

    __tablename__ = "peliculas"

    id: Mapped[int] = mapped_column("id_pelicula", Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("titulo", String(255), nullable=False, index=True)
    release_year: Mapped[int] = mapped_column("año_lanzamiento", Integer, nullable=False)
    duration_minutes: Mapped[int] = mapped_column("duracion_minutos", Integer, nullable=False)
    synopsis: Mapped[str | None] = mapped_column("sinopsis", Text, nullable=True)
    rating: Mapped[Decimal] = mapped_column("calificacion", Numeric(3, 1), nullable=False)
    poster_url: Mapped[str | None] = mapped_column("poster_url", String(500), nullable=True)

    genre_id: Mapped[int] = mapped_column(
        "id_genero", ForeignKey("generos.id_genero"), nullable=False, index=True
    )
    director_id: Mapped[int] = mapped_column(
        "id_director", ForeignKey("directores.id_director"), nullable=False, index=True
    )

    # Relationships
    genre: Mapped["Genre"] = relationship(back_populates="movies")
    director: Mapped["Director"] = relationship(back_populates="movies")

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title!r}, year={self.release_year})>"
