"""Configuration management for PyScholar."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from current directory
load_dotenv(dotenv_path=Path.cwd() / ".env", verbose=False)


# Constants
DEFAULT_BASE_URL = "https://scholar.google.com"
DEFAULT_LANGUAGE = "en"
DEFAULT_MAX_RETRIES = 0
DEFAULT_RETRY_BACKOFF_FACTOR = 0.5
DEFAULT_RETRY_HTTP_CODES = [429, 500, 502, 503, 504]

# Pagination
PUBLICATIONS_PAGE_SIZE = 100
PUBLICATIONS_MODE_MARKER = "ao"

# HTTP Client Defaults
DEFAULT_TOTAL_TIMEOUT = 30
DEFAULT_CONNECT_TIMEOUT = 10

# Cache capacities (number of entries per entity space)
DEFAULT_PUBLICATION_CACHE_SIZE = 10000
DEFAULT_ARTICLE_CACHE_SIZE = 10000
DEFAULT_ENTITY_CACHE_SIZE = 1000


class ScholarConfig(dict):
    """Configuration class for PyScholar.

    Attributes
    ----------
    base_url : str
        Base URL of the scholar site.
    language : str
        Interface language requested from the site (``hl`` parameter).
    max_retries : int
        Transport-level retries for retryable HTTP statuses. Defaults to 0,
        retry policy is left to the caller.
    retry_backoff_factor : float
        Backoff factor for retries.
    retry_http_codes : list
        List of HTTP status codes to retry on.
    total_timeout : float
        Per-request read/write timeout in seconds.
    connect_timeout : float
        Per-request connect timeout in seconds.
    http2 : bool
        Whether the HTTP client negotiates HTTP/2.
    publication_cache_size : int
        Capacity of the publication-list cache.
    article_cache_size : int
        Capacity of the article cache.
    entity_cache_size : int
        Capacity of every other entity cache.
    """

    def __getattr__(self, key):
        try:
            return super().__getitem__(key)
        except KeyError as e:
            raise AttributeError(key) from e

    def __setattr__(self, key, value):
        return super().__setitem__(key, value)


def _get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable with validation."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        import warnings

        warnings.warn(
            f"Invalid integer for {key}: {value}. Using default: {default}",
            stacklevel=2,
        )
        return default


def _get_env_float(key: str, default: float) -> float:
    """Get float from environment variable with validation."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        import warnings

        warnings.warn(
            f"Invalid float for {key}: {value}. Using default: {default}",
            stacklevel=2,
        )
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


config = ScholarConfig(
    # Environment variables override defaults
    base_url=os.getenv("SCHOLAR_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
    language=os.getenv("SCHOLAR_LANGUAGE", DEFAULT_LANGUAGE),
    max_retries=_get_env_int("SCHOLAR_MAX_RETRIES", DEFAULT_MAX_RETRIES),
    retry_backoff_factor=_get_env_float(
        "SCHOLAR_RETRY_BACKOFF", DEFAULT_RETRY_BACKOFF_FACTOR
    ),
    retry_http_codes=DEFAULT_RETRY_HTTP_CODES,
    # HTTP client configurations
    total_timeout=_get_env_float("SCHOLAR_TOTAL_TIMEOUT", DEFAULT_TOTAL_TIMEOUT),
    connect_timeout=_get_env_float("SCHOLAR_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
    http2=_get_env_bool("SCHOLAR_HTTP2", True),
    # Cache configurations
    publication_cache_size=_get_env_int(
        "SCHOLAR_CACHE_PUBLICATIONS", DEFAULT_PUBLICATION_CACHE_SIZE
    ),
    article_cache_size=_get_env_int(
        "SCHOLAR_CACHE_ARTICLES", DEFAULT_ARTICLE_CACHE_SIZE
    ),
    entity_cache_size=_get_env_int(
        "SCHOLAR_CACHE_ENTITIES", DEFAULT_ENTITY_CACHE_SIZE
    ),
)
