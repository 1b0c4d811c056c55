"""Genre and director lookup endpoints."""

from fastapi import APIRouter, Depends

from moviecatalog.api.dependencies import get_gateway
from moviecatalog.models import Director, Genre
from moviecatalog.schemas import DirectorResponse, GenreResponse
from moviecatalog.services.gateway import CatalogGateway

router = APIRouter()


@router.get("/generos", response_model=list[GenreResponse])
async def list_genres(gateway: CatalogGateway = Depends(get_gateway)) -> list[Genre]:
    """Get all genres ordered by name."""
    return await gateway.list_genres()


@router.get("/directores", response_model=list[DirectorResponse])
async def list_directors(gateway: CatalogGateway = Depends(get_gateway)) -> list[Director]:
    """Get all directors ordered by first name, then last name."""
    return await gateway.list_directors()
