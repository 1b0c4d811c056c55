"""Shared FastAPI dependencies."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from moviecatalog.database import get_db
from moviecatalog.services.gateway import CatalogGateway


async def get_gateway(db: AsyncSession = Depends(get_db)) -> CatalogGateway:
    """Provide a catalog gateway bound to the request's database session."""
    return CatalogGateway(db)
