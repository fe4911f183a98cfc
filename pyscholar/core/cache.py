"""In-memory caches for fetched entities."""

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any

from pyscholar.core.config import config
from pyscholar.logger import get_logger

logger = get_logger()


class EntityCache:
    """Bounded least-recently-used cache for one entity kind.

    All operations take an internal lock, so a reader sees either the
    previous value for a key or the newly stored one.

    Parameters
    ----------
    name : str
        Entity kind, used in log messages.
    capacity : int
        Maximum number of entries. Must be positive.
    """

    def __init__(self, name: str, capacity: int):
        if capacity < 1:
            raise ValueError("capacity should be a positive integer")
        self.name = name
        self.capacity = capacity
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._entries:
                logger.debug(f"Cache miss [{self.name}]: {key}")
                return None
            self._entries.move_to_end(key)
            logger.debug(f"Cache hit [{self.name}]: {key}")
            return self._entries[key]

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache evict [{self.name}]: {evicted}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@dataclass(frozen=True)
class CacheConfig:
    """Capacities of the per-entity caches."""

    publications: int = config.publication_cache_size
    articles: int = config.article_cache_size
    entities: int = config.entity_cache_size


class CacheService:
    """Separate cache spaces for every entity kind.

    A key stored in one space is never visible from another, even if the
    literal key strings are equal.
    """

    def __init__(self, cache_config: CacheConfig | None = None):
        cache_config = cache_config or CacheConfig()
        self.publications = EntityCache("publications", cache_config.publications)
        self.articles = EntityCache("articles", cache_config.articles)
        self.citation_metrics = EntityCache("citation_metrics", cache_config.entities)
        self.author_metrics = EntityCache("author_metrics", cache_config.entities)
        self.co_authors = EntityCache("co_authors", cache_config.entities)
        self.authors = EntityCache("authors", cache_config.entities)

    @property
    def spaces(self) -> tuple[EntityCache, ...]:
        return (
            self.publications,
            self.articles,
            self.citation_metrics,
            self.author_metrics,
            self.co_authors,
            self.authors,
        )

    def clear(self) -> None:
        for space in self.spaces:
            space.clear()


def publications_cache_key(author_id: str, fetch_quantity, sort_by) -> str:
    """Composite key of every parameter that affects a publication list."""
    return f"{author_id}-{fetch_quantity}-{getattr(sort_by, 'value', sort_by)}"
