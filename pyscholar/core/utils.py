"""Utility functions for PyScholar."""

import re
from urllib.parse import parse_qs
from urllib.parse import urlparse

from pyscholar.exceptions import InvalidRequestError

_AUTHOR_ID_PATTERN = re.compile(r"^[\w-]+$")
_USER_PARAM_PATTERN = re.compile(r"user=([\w-]+)")


def only_numbers(value: str | None) -> str:
    """Return only the digit characters of a string.

    Parameters
    ----------
    value : str or None
        Raw text such as ``"1,234"`` or ``"Cited by 56"``.

    Returns
    -------
    str
        The digits in order of appearance, possibly empty.
    """
    if not value:
        return ""
    return "".join(ch for ch in value if ch.isdigit())


def citation_value(value: str | None) -> int:
    """Numeric citation count; non-numeric or empty text counts as 0."""
    digits = only_numbers(value)
    return int(digits) if digits else 0


def year_value(value: str | None) -> int:
    """Numeric year; non-numeric or empty text counts as 0."""
    try:
        return int((value or "").strip())
    except ValueError:
        return 0


def validate_author_id(author_id) -> str:
    """Validate and normalize an author identifier.

    Raises
    ------
    InvalidRequestError
        If the identifier is empty or contains characters other than word
        characters and ``-``.
    """
    if not isinstance(author_id, str):
        raise InvalidRequestError(
            "Author ID must be a string", field="author_id", value=str(author_id)
        )
    value = author_id.strip()
    if not value or not _AUTHOR_ID_PATTERN.match(value):
        raise InvalidRequestError(
            "Invalid author ID", field="author_id", value=author_id
        )
    return value


def validate_article_link(link) -> str:
    """Validate that an article link is an absolute HTTP(S) URL."""
    if not isinstance(link, str) or not link.strip():
        raise InvalidRequestError(
            "Article link must be a non-empty string", field="link", value=str(link)
        )
    value = link.strip()
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRequestError(
            "Article link must be an absolute http(s) URL", field="link", value=link
        )
    return value


def extract_publication_id(link: str | None) -> str:
    """Extract the identity token (``citation_for_view`` value) from a link.

    Returns an empty string if the link does not carry one.
    """
    if not link:
        return ""
    query = urlparse(link).query
    values = parse_qs(query).get("citation_for_view")
    if values:
        return values[0]
    marker = "citation_for_view="
    if marker in link:
        return link.split(marker, 1)[1].split("&", 1)[0]
    return ""


def extract_author_id(link: str | None) -> str | None:
    """Extract the ``user`` parameter from a profile link."""
    if not link:
        return None
    match = _USER_PARAM_PATTERN.search(link)
    return match.group(1) if match else None
