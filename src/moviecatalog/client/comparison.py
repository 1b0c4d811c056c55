"""State for the technology comparison section."""

import logging
from typing import Any

from moviecatalog.client.api import CatalogClient, CatalogClientError
from moviecatalog.technologies import TECHNOLOGIES, Technology

logger = logging.getLogger(__name__)


class TechComparison:
    """
    Tracks which technology cards are expanded and the last query run.

    Results from a previous query are kept if a new one fails.
    """

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self.info_open: dict[str, bool] = {tech.id: False for tech in TECHNOLOGIES}
        self.active = ""
        self.results: list[dict[str, Any]] = []
        self.loading_tech = ""
        self.error = ""

    @property
    def technologies(self) -> tuple[Technology, ...]:
        return TECHNOLOGIES

    def toggle_info(self, tech_id: str) -> bool:
        """Expand or collapse a technology card; returns the new state."""
        if tech_id not in self.info_open:
            raise KeyError(tech_id)
        self.info_open[tech_id] = not self.info_open[tech_id]
        return self.info_open[tech_id]

    async def run_query(self, tech_id: str) -> bool:
        """Fetch the movie list on behalf of ``tech_id``."""
        self.loading_tech = tech_id
        self.error = ""
        try:
            self.results = await self.client.list_movies_for_technology(tech_id)
            self.active = tech_id
            return True
        except CatalogClientError as e:
            logger.warning(f"Comparison query for {tech_id} failed: {e.message}")
            self.error = f"Could not reach the backend for technology {tech_id}"
            return False
        finally:
            self.loading_tech = ""
