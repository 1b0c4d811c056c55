"""Field validation for movie payloads and request parameters.

Numeric fields may arrive as JSON numbers or as numeric strings (values
typed into an HTML form), so every check parses before comparing.
"""

import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from moviecatalog.exceptions import MovieValidationError
from moviecatalog.schemas.movie import MovieWrite, SearchParams
from moviecatalog.utils.text import strip_or_none

MIN_RELEASE_YEAR = 1888
FUTURE_YEAR_MARGIN = 5
MIN_DURATION = 1
MAX_DURATION = 500
MIN_RATING = 0.0
MAX_RATING = 10.0
# Upper bound of the INT columns and procedure parameters
MAX_ID = 2_147_483_647

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def max_release_year(today: date | None = None) -> int:
    """Latest accepted release year, relative to the current calendar year."""
    return (today or date.today()).year + FUTURE_YEAR_MARGIN


def parse_int(value: Any) -> int | None:
    """
    Parse an integral value.

    Args:
        value: int, integral float, or numeric string

    Returns:
        The integer, or None if the value is missing or not integral
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_PATTERN.fullmatch(text):
            return int(text)
        number = parse_number(text)
        if number is not None and number.is_integer():
            return int(number)
    return None


def parse_number(value: Any) -> float | None:
    """Parse a finite real number from a number or numeric string."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not NUMBER_PATTERN.fullmatch(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def is_valid_year(year: int | None) -> bool:
    return year is not None and MIN_RELEASE_YEAR <= year <= max_release_year()


def is_valid_id(value: int | None) -> bool:
    """True for a positive integer that fits the database INT columns."""
    return value is not None and 1 <= value <= MAX_ID


def check_movie(payload: Mapping[str, Any]) -> str | None:
    """
    Check a movie payload against the field constraints.

    Constraints are evaluated in a fixed order and only the first
    violation is reported.

    Args:
        payload: Request body using the wire field names

    Returns:
        The violated-constraint message, or None if the payload is valid
    """
    title = payload.get("titulo")
    if not isinstance(title, str) or not title.strip():
        return "Invalid title"

    if not is_valid_year(parse_int(payload.get("año"))):
        return "Invalid year"

    duration = parse_int(payload.get("duracion"))
    if duration is None or not MIN_DURATION <= duration <= MAX_DURATION:
        return "Invalid duration"

    rating = parse_number(payload.get("calificacion"))
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        return "Invalid rating"

    genre_id = parse_int(payload.get("id_genero"))
    if not is_valid_id(genre_id):
        return "Invalid genre"

    director_id = parse_int(payload.get("id_director"))
    if not is_valid_id(director_id):
        return "Invalid director"

    poster_url = payload.get("poster_url")
    if poster_url is not None and not isinstance(poster_url, str):
        return "Invalid poster URL"

    synopsis = payload.get("sinopsis")
    if synopsis is not None and not isinstance(synopsis, str):
        return "Invalid synopsis"

    return None


def clean_movie(payload: Mapping[str, Any]) -> MovieWrite:
    """
    Validate a movie payload and return its trimmed, typed fields.

    Raises:
        MovieValidationError: If any constraint is violated
    """
    error = check_movie(payload)
    if error:
        raise MovieValidationError(error)

    return MovieWrite(
        title=payload["titulo"].strip(),
        release_year=parse_int(payload["año"]),
        duration_minutes=parse_int(payload["duracion"]),
        synopsis=strip_or_none(payload.get("sinopsis")),
        rating=parse_number(payload["calificacion"]),
        genre_id=parse_int(payload["id_genero"]),
        director_id=parse_int(payload["id_director"]),
        poster_url=strip_or_none(payload.get("poster_url")),
    )


def parse_movie_id(raw: Any) -> int:
    """
    Parse a movie identifier taken from the URL path.

    Raises:
        MovieValidationError: If the identifier is not a positive integer within INT range
    """
    movie_id = parse_int(raw)
    if not is_valid_id(movie_id):
        raise MovieValidationError("Invalid id")
    return movie_id


def parse_search_params(
    title: str | None = None,
    genre_id: str | None = None,
    year: str | None = None,
) -> SearchParams:
    """
    Validate optional search filters. Empty strings count as absent.

    Raises:
        MovieValidationError: If the year or genre id is malformed
    """
    parsed_year = None
    if year:
        parsed_year = parse_int(year)
        if not is_valid_year(parsed_year):
            raise MovieValidationError("Invalid search year")

    parsed_genre = None
    if genre_id:
        parsed_genre = parse_int(genre_id)
        if parsed_genre is None or not -MAX_ID - 1 <= parsed_genre <= MAX_ID:
            raise MovieValidationError("Invalid genre id")

    return SearchParams(title=title or None, genre_id=parsed_genre, year=parsed_year)
