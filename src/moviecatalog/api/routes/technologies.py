"""Technology comparison endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from moviecatalog.api.dependencies import get_gateway
from moviecatalog.exceptions import TechnologyNotFoundError
from moviecatalog.schemas import MovieResponse
from moviecatalog.services.gateway import CatalogGateway
from moviecatalog.technologies import get_technology

router = APIRouter()


@router.get("/peliculas/tecnologia/{tecnologia}", response_model=list[MovieResponse])
async def list_movies_for_technology(
    tecnologia: str,
    gateway: CatalogGateway = Depends(get_gateway),
) -> list[dict[str, Any]]:
    """
    List movies on behalf of one of the compared technologies.

    Every technology reads through the same gateway, so the rows are the
    ones GET /peliculas returns.
    """
    if get_technology(tecnologia) is None:
        raise TechnologyNotFoundError()
    return await gateway.list_movies()
