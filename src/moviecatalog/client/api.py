"""HTTP client for the movie catalog API."""

import logging
from typing import Any

import httpx

from moviecatalog.config import settings

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Could not connect to the catalog service"


class CatalogClientError(Exception):
    """A catalog request failed; ``message`` is safe to show to the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CatalogClient:
    """Async client for every endpoint of the catalog API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root (uses settings if not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
            transport: Optional transport, e.g. ``httpx.ASGITransport`` in tests
        """
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.client_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise CatalogClientError(CONNECTION_ERROR_MESSAGE) from e

        if response.is_error:
            raise CatalogClientError(_error_message(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body")
            raise CatalogClientError(CONNECTION_ERROR_MESSAGE, status_code=response.status_code) from e

    async def list_movies(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/peliculas")

    async def search_movies(
        self,
        title: str | None = None,
        genre_id: int | str | None = None,
        year: int | str | None = None,
    ) -> list[dict[str, Any]]:
        """Search movies; filters left as None are not sent."""
        params = {
            key: value
            for key, value in (("titulo", title), ("id_genero", genre_id), ("año", year))
            if value is not None
        }
        return await self._request("GET", "/api/buscar", params=params)

    async def create_movie(self, payload: dict[str, Any]) -> int:
        """Create a movie and return its new identifier."""
        data = await self._request("POST", "/api/peliculas", json=payload)
        return data["new_id"]

    async def update_movie(self, movie_id: int, payload: dict[str, Any]) -> int:
        """Update a movie and return the affected-row count."""
        data = await self._request("PUT", f"/api/peliculas/{movie_id}", json=payload)
        return data["affected_rows"]

    async def delete_movie(self, movie_id: int) -> int:
        """Delete a movie and return the affected-row count."""
        data = await self._request("DELETE", f"/api/peliculas/{movie_id}")
        return data["affected_rows"]

    async def list_genres(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/generos")

    async def list_directors(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/directores")

    async def list_movies_for_technology(self, tech_id: str) -> list[dict[str, Any]]:
        return await self._request("GET", f"/api/peliculas/tecnologia/{tech_id}")


def _error_message(response: httpx.Response) -> str:
    """Prefer the server's ``error`` message, else describe the status."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status code {response.status_code}"
