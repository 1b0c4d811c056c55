"""Movie API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from moviecatalog.api.dependencies import get_gateway
from moviecatalog.schemas import MovieCreated, MovieResponse, RowsAffected
from moviecatalog.services.gateway import CatalogGateway
from moviecatalog.services.validation import clean_movie, parse_movie_id, parse_search_params

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/peliculas", response_model=list[MovieResponse])
async def list_movies(
    gateway: CatalogGateway = Depends(get_gateway),
) -> list[dict[str, Any]]:
    """
    Get every movie with its genre and director names.

    Returns:
        Movies ordered by title
    """
    return await gateway.list_movies()


@router.get("/buscar", response_model=list[MovieResponse])
async def search_movies(
    titulo: str | None = Query(None, description="Title substring"),
    id_genero: str | None = Query(None, description="Genre id"),
    anio: str | None = Query(None, alias="año", description="Release year"),
    gateway: CatalogGateway = Depends(get_gateway),
) -> list[dict[str, Any]]:
    """
    Search movies by title, genre and year.

    Parameters are validated here; the matching itself is done by the
    BuscarPeliculas procedure.
    """
    params = parse_search_params(title=titulo, genre_id=id_genero, year=anio)
    return await gateway.search_movies(
        title=params.title,
        genre_id=params.genre_id,
        year=params.year,
    )


@router.post("/peliculas", response_model=MovieCreated)
async def create_movie(
    payload: dict[str, Any] = Body(...),
    gateway: CatalogGateway = Depends(get_gateway),
) -> MovieCreated:
    """Create a movie and return the identifier assigned to it."""
    movie = clean_movie(payload)
    new_id = await gateway.insert_movie(movie)
    return MovieCreated(new_id=new_id)


@router.put("/peliculas/{movie_id}", response_model=RowsAffected)
async def update_movie(
    movie_id: str,
    payload: dict[str, Any] = Body(...),
    gateway: CatalogGateway = Depends(get_gateway),
) -> RowsAffected:
    """
    Replace every field of an existing movie.

    An id that matches no movie is not an error: the response reports
    zero affected rows.
    """
    movie = clean_movie(payload)
    parsed_id = parse_movie_id(movie_id)
    affected = await gateway.update_movie(parsed_id, movie)
    return RowsAffected(affected_rows=affected)


@router.delete("/peliculas/{movie_id}", response_model=RowsAffected)
async def delete_movie(
    movie_id: str,
    gateway: CatalogGateway = Depends(get_gateway),
) -> RowsAffected:
    """Delete a movie and report how many rows were removed."""
    parsed_id = parse_movie_id(movie_id)
    affected = await gateway.delete_movie(parsed_id)
    return RowsAffected(affected_rows=affected)
