"""SQLAlchemy ORM models."""

from moviecatalog.models.base import Base
from moviecatalog.models.director import Director
from moviecatalog.models.genre import Genre
from moviecatalog.models.movie import Movie

__all__ = ["Base", "Director", "Genre", "Movie"]
