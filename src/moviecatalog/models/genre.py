"""Genre lookup model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviecatalog.models.base import Base

if TYPE_CHECKING:
    from moviecatalog.models.movie import Movie


class Genre(Base):
    """
    Genre model.

    Read-only from the API's point of view; rows are created by the
    seed script or by whoever administers the database.
    """

    __tablename__ = "generos"

    id: Mapped[int] = mapped_column("id_genero", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nombre", String(100), nullable=False, unique=True)

    movies: Mapped[list["Movie"]] = relationship(back_populates="genre")

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name={self.name!r})>"
