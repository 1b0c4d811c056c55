"""Client for the catalog API and the in-memory state it drives."""

from moviecatalog.client.api import CatalogClient, CatalogClientError
from moviecatalog.client.comparison import TechComparison
from moviecatalog.client.state import CatalogState, FilterCriteria, MovieForm

__all__ = [
    "CatalogClient",
    "CatalogClientError",
    "CatalogState",
    "FilterCriteria",
    "MovieForm",
    "TechComparison",
]
