"""Core module for PyScholar."""

from .cache import CacheConfig
from .cache import CacheService
from .cache import EntityCache
from .config import ScholarConfig
from .config import config
from .utils import citation_value
from .utils import only_numbers
from .utils import year_value

__all__ = [
    "CacheConfig",
    "CacheService",
    "EntityCache",
    "ScholarConfig",
    "config",
    "citation_value",
    "only_numbers",
    "year_value",
]
