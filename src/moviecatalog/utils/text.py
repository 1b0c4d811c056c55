"""Text helpers shared by request sanitization and client-side filtering."""

from typing import Any


def strip_or_none(value: Any) -> str | None:
    """
    Trim an optional text field.

    Empty values become None so they are stored as NULL. A value made of
    whitespace only is trimmed to an empty string, not None.

    Args:
        value: Raw field value (text or None)

    Returns:
        Trimmed text, or None if the value was empty
    """
    if not value:
        return None
    return str(value).strip()


def contains_ignore_case(text: str | None, fragment: str) -> bool:
    """Return True if ``fragment`` occurs in ``text``, ignoring case."""
    if text is None:
        return False
    return fragment.casefold() in text.casefold()
