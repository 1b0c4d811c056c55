"""Error types surfaced by the catalog API."""


class CatalogError(Exception):
    """Base error carrying a client-facing message and HTTP status."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class MovieValidationError(CatalogError):
    """A request field is missing, malformed or out of range."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ReferentialIntegrityError(CatalogError):
    """The genre or director referenced by a movie does not exist."""

    def __init__(self):
        super().__init__("Invalid genre or director", status_code=400)


class GatewayError(CatalogError):
    """The database failed; details are logged, never returned."""

    def __init__(self):
        super().__init__("Internal server error", status_code=500)


class TechnologyNotFoundError(CatalogError):
    def __init__(self):
        super().__init__("Unknown technology", status_code=404)
