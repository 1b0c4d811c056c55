"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviecatalog import __version__
from moviecatalog.api.errors import register_exception_handlers
from moviecatalog.api.routes import health, lookups, movies, technologies
from moviecatalog.config import settings
from moviecatalog.database import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Movie catalog API started on {settings.api_host}:{settings.api_port}")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="Movie Catalog API",
    description="CRUD over a movie catalog backed by stored procedures",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(technologies.router, prefix="/api", tags=["technologies"])
app.include_router(lookups.router, prefix="/api", tags=["lookups"])
