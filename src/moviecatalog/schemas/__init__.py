"""Pydantic schemas for API requests and responses."""

from moviecatalog.schemas.lookup import DirectorResponse, GenreResponse
from moviecatalog.schemas.movie import (
    MovieCreated,
    MovieResponse,
    MovieWrite,
    RowsAffected,
    SearchParams,
)

__all__ = [
    "DirectorResponse",
    "GenreResponse",
    "MovieCreated",
    "MovieResponse",
    "MovieWrite",
    "RowsAffected",
    "SearchParams",
]
