"""Director lookup model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from moviecatalog.models.base import Base

if TYPE_CHECKING:
    from moviecatalog.models.movie import Movie


class Director(Base):
    __tablename__ = "directores"

    id: Mapped[int] = mapped_column("id_director", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("nombre", String(100), nullable=False)
    last_name: Mapped[str] = mapped_column("apellido", String(100), nullable=False)

    movies: Mapped[list["Movie"]] = relationship(back_populates="director")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Director(id={self.id}, name={self.full_name!r})>"
