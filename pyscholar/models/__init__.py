"""Pydantic models for PyScholar records."""

from .article import Article
from .author import Author
from .author import CoAuthor
from .author import ProfileCard
from .author import Scientist
from .base import ScholarRecord
from .metrics import AuthorMetrics
from .metrics import CitationMetrics
from .publication import Publication
from .query import FetchQuantity
from .query import SortBy

__all__ = [
    "Article",
    "Author",
    "AuthorMetrics",
    "CitationMetrics",
    "CoAuthor",
    "FetchQuantity",
    "ProfileCard",
    "Publication",
    "ScholarRecord",
    "Scientist",
    "SortBy",
]
